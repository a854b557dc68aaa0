from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SANDBOX_HOME = ROOT / ".test_place" / "wsquery-home"
os.environ.setdefault("WSQUERY_HOME", str(SANDBOX_HOME))
SANDBOX_HOME.mkdir(parents=True, exist_ok=True)
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wsquery.domain.commands.value_objects import Persona  # noqa: E402
from wsquery.ports.package_index import PackageIndex  # noqa: E402
from wsquery.settings import RuntimeSettings  # noqa: E402


class FakeIndex(PackageIndex):
    """In-memory index that records every collaborator call."""

    def __init__(self, persona: Persona = Persona.PACKAGE, **responses: Any) -> None:
        self._persona = persona
        self.responses: Dict[str, Any] = {
            "search_path": ["/ws/src"],
            "find": "/ws/src/roscpp",
            "list": [("roscpp", "/ws/src/roscpp"), ("rospy", "/ws/src/rospy")],
            "list_duplicates": [],
            "deps": ["rosconsole", "roslib"],
            "depends_on": ["rviz", "tf"],
            "deps_manifests": ["/ws/src/roslib/manifest.xml", "/ws/src/rosconsole/manifest.xml"],
            "deps_msgsrv": ["/ws/src/std_msgs/msg_gen/generated"],
            "deps_indent": ["rosconsole", "  roslib"],
            "deps_why": "Dependency chains from roscpp to roslib:\n* roscpp -> roslib\n",
            "rosdeps": ["name: boost", "name: log4cxx"],
            "vcs": ["type: git\turl: https://example.org/ros.git"],
            "exports": ["-I/ws/src/roscpp/include -DROS", "-I/ws/src/roslib/include"],
            "plugins": ["rviz /ws/src/rviz/plugin.xml"],
            "contents": ["roscpp", "rospy"],
            "contains": ("ros_comm", "/ws/stacks/ros_comm"),
            "profile": ["Full tree crawl took 0.01 seconds."],
        }
        self.responses.update(responses)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.failures: Dict[str, Exception] = {}

    @property
    def persona(self) -> Persona:
        return self._persona

    def _answer(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method in self.failures:
            raise self.failures[method]
        return self.responses.get(method)

    def called(self, method: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    def queries(self) -> List[str]:
        return [name for name, _ in self.calls]

    def set_quiet(self, quiet: bool) -> None:
        super().set_quiet(quiet)
        self.calls.append(("set_quiet", (quiet,)))

    def usage(self) -> str:
        self.calls.append(("usage", ()))
        return super().usage()

    def search_path(self) -> List[str]:
        return self._answer("search_path")

    def crawl(self, search_path: Sequence[str], force: bool) -> None:
        self._answer("crawl", tuple(search_path), force)

    def find(self, name: str) -> str:
        return self._answer("find", name)

    def list(self) -> List[Tuple[str, str]]:
        return self._answer("list")

    def list_duplicates(self) -> List[str]:
        return self._answer("list_duplicates")

    def deps(self, name: str, direct: bool) -> List[str]:
        return self._answer("deps", name, direct)

    def depends_on(self, name: str, direct: bool) -> List[str]:
        return self._answer("depends_on", name, direct)

    def deps_manifests(self, name: str, direct: bool) -> List[str]:
        return self._answer("deps_manifests", name, direct)

    def deps_msgsrv(self, name: str, direct: bool) -> List[str]:
        return self._answer("deps_msgsrv", name, direct)

    def deps_indent(self, name: str, direct: bool) -> List[str]:
        return self._answer("deps_indent", name, direct)

    def deps_why(self, name: str, target: str) -> str:
        return self._answer("deps_why", name, target)

    def rosdeps(self, name: str, direct: bool) -> List[str]:
        return self._answer("rosdeps", name, direct)

    def vcs(self, name: str, direct: bool) -> List[str]:
        return self._answer("vcs", name, direct)

    def exports(self, name: str, lang: str, attrib: str, deps_only: bool) -> List[str]:
        return self._answer("exports", name, lang, attrib, deps_only)

    def plugins(self, name: str, attrib: str, top: str) -> List[str]:
        return self._answer("plugins", name, attrib, top)

    def contents(self, stack: str) -> List[str]:
        return self._answer("contents", stack)

    def contains(self, package: str) -> Tuple[str, str]:
        return self._answer("contains", package)

    def profile(self, search_path: Sequence[str], zombie_only: bool, length: int) -> List[str]:
        return self._answer("profile", tuple(search_path), zombie_only, length)


def make_runtime_settings(base: Path, **overrides: Any) -> RuntimeSettings:
    home = base / "home"
    log_dir = base / "logs"
    for directory in (home, log_dir):
        directory.mkdir(parents=True, exist_ok=True)
    return RuntimeSettings(home_dir=home, log_dir=log_dir, cli_version="0.1.0", **overrides)


@pytest.fixture
def settings(tmp_path: Path) -> RuntimeSettings:
    return make_runtime_settings(tmp_path)


@pytest.fixture
def settings_factory(tmp_path: Path) -> Callable[..., RuntimeSettings]:
    def factory(**overrides: Any) -> RuntimeSettings:
        return make_runtime_settings(tmp_path, **overrides)

    return factory


@pytest.fixture
def make_index() -> Callable[..., FakeIndex]:
    return FakeIndex
