"""Whitespace-token implementation of the flag filter port."""

from __future__ import annotations

from typing import List

from wsquery.domain.flags import LIBRARY_NAME_MARKER
from wsquery.ports.flag_filter import FlagFilter, FlagFilterError


class TokenFlagFilter(FlagFilter):
    """Classify flag tokens by marker.

    A token matches when it starts with the marker and carries a value
    (``-Ifoo``), or when it is the bare marker followed by the value as the
    next token (``-I foo``). Absolute static archives (``/x/libfoo.a``) count
    as library names. Every kept token is emitted followed by one space.
    """

    def filter(self, flags: str, marker: str, *, select: bool, strip_prefix: bool, dedup: bool) -> str:
        if not marker:
            raise FlagFilterError("flag filter requires a non-empty marker")
        tokens = flags.split()
        kept: List[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            value: str | None = None
            if token.startswith(marker) and len(token) > len(marker):
                value = token[len(marker):]
            elif token == marker and index + 1 < len(tokens):
                index += 1
                value = tokens[index]
            elif marker == LIBRARY_NAME_MARKER and _is_static_archive(token):
                value = token
            index += 1

            if value is None:
                if not select:
                    kept.append(token)
                continue
            if select:
                if strip_prefix or value == token:
                    kept.append(value)
                else:
                    kept.append(f"{marker}{value}")

        if dedup:
            kept = list(dict.fromkeys(kept))
        return "".join(f"{token} " for token in kept)


def _is_static_archive(token: str) -> bool:
    return len(token) > 2 and token.startswith("/") and token.endswith(".a")


__all__ = ["TokenFlagFilter"]
