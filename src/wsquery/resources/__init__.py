"""Packaged resources for wsquery."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

from wsquery.domain.commands.value_objects import Persona

__all__ = ["load_usage"]


@lru_cache(maxsize=2)
def load_usage(persona: Persona) -> str:
    """Return the usage text shipped for ``persona``."""

    entry = resources.files(__name__) / "usage" / f"{persona.tool}.txt"
    return entry.read_text("utf-8")
