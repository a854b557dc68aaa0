"""Runtime settings for the wsquery tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from wsquery import __version__

CONFIG_FILE = "config.yaml"


class SettingsError(RuntimeError):
    """Raised when the settings file cannot be understood."""


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    log_dir: Path
    lang_disable: str | None = None
    backend: str | None = None
    cli_version: str = __version__

    @property
    def config_file(self) -> Path:
        return self.home_dir / CONFIG_FILE


def _default_home_dir() -> Path:
    override = os.environ.get("WSQUERY_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".wsquery"


def _read_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text("utf-8")) or {}
    if not isinstance(data, dict):
        raise SettingsError(f"Invalid {path.name} structure: top level is not a mapping")
    return data


def _optional_str(data: dict[str, Any], key: str, env: str) -> str | None:
    value = os.environ.get(env)
    if value is not None:
        return value
    raw = data.get(key)
    if raw is None:
        return None
    if isinstance(raw, list):
        # allow lang_disable as a YAML list
        return ":".join(str(item) for item in raw)
    return str(raw)


def load_settings() -> RuntimeSettings:
    base = _default_home_dir()
    config = _read_config(base / CONFIG_FILE)
    return RuntimeSettings(
        home_dir=base,
        log_dir=base / "logs",
        lang_disable=_optional_str(config, "lang_disable", "WSQUERY_LANG_DISABLE"),
        backend=_optional_str(config, "backend", "WSQUERY_INDEX_BACKEND"),
    )

