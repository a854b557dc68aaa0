"""Port definition for the token-classifying flag filter."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FlagFilterError(RuntimeError):
    """Raised when a flag string cannot be filtered."""


class FlagFilter(ABC):
    @abstractmethod
    def filter(self, flags: str, marker: str, *, select: bool, strip_prefix: bool, dedup: bool) -> str:
        """Return the tokens of ``flags`` matching ``marker`` (``select``) or the rest."""
