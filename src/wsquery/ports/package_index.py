"""Port definitions for the package index collaborator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, Tuple

from wsquery.domain.commands.value_objects import Persona


class PackageIndexError(RuntimeError):
    """Raised when the index cannot answer a query (unknown package, broken path, I/O)."""


class PackageIndex(ABC):
    """Read-only view over the crawled workspace.

    Backends are expected to present a consistent snapshot for the
    duration of one dispatch; wsquery never locks the index.
    """

    quiet: bool = False

    @property
    @abstractmethod
    def persona(self) -> Persona:
        """Tool identity the index was created for."""

    def usage(self) -> str:
        from wsquery.resources import load_usage

        return load_usage(self.persona)

    def set_quiet(self, quiet: bool) -> None:
        self.quiet = quiet

    def locate(self, directory: Path) -> str | None:
        """Return the package/stack owning ``directory``, if the backend can tell."""

        return None

    @abstractmethod
    def search_path(self) -> List[str]:
        """Directories to crawl, in precedence order."""

    @abstractmethod
    def crawl(self, search_path: Sequence[str], force: bool) -> None:
        """Refresh the index; ``force`` requests a full rescan."""

    @abstractmethod
    def find(self, name: str) -> str:
        ...

    @abstractmethod
    def list(self) -> List[Tuple[str, str]]:
        ...

    @abstractmethod
    def list_duplicates(self) -> List[str]:
        ...

    @abstractmethod
    def deps(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def depends_on(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def deps_manifests(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def deps_msgsrv(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def deps_indent(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def deps_why(self, name: str, target: str) -> str:
        """Explain every dependency path from ``name`` to ``target``."""

    @abstractmethod
    def rosdeps(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def vcs(self, name: str, direct: bool) -> List[str]:
        ...

    @abstractmethod
    def exports(self, name: str, lang: str, attrib: str, deps_only: bool) -> List[str]:
        """Raw export strings; ``deps_only`` drops the package's own entries."""

    @abstractmethod
    def plugins(self, name: str, attrib: str, top: str) -> List[str]:
        ...

    @abstractmethod
    def contents(self, stack: str) -> List[str]:
        ...

    @abstractmethod
    def contains(self, package: str) -> Tuple[str, str]:
        """Return ``(stack_name, stack_path)`` of the stack owning ``package``."""

    @abstractmethod
    def profile(self, search_path: Sequence[str], zombie_only: bool, length: int) -> List[str]:
        """Crawl with timing; ``length`` of -1 means unbounded."""


__all__ = ["PackageIndex", "PackageIndexError"]
