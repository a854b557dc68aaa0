"""Composition of token-filter passes over exported compiler/linker flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, Tuple

from wsquery.ports.flag_filter import FlagFilter

INCLUDE_PATH_MARKER = "-I"
LIBRARY_PATH_MARKER = "-L"
LIBRARY_NAME_MARKER = "-l"

# Exports consumed by the flag commands always come from this language.
BUILD_LANGUAGE = "cpp"


class FilterMode(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class FilterStage:
    mode: FilterMode
    marker: str
    strip_prefix: bool = False
    dedup: bool = False

    def apply(self, flags: str, token_filter: FlagFilter) -> str:
        return token_filter.filter(
            flags,
            self.marker,
            select=self.mode is FilterMode.INCLUDE,
            strip_prefix=self.strip_prefix,
            dedup=self.dedup,
        )


@dataclass(frozen=True)
class FlagFilterPipeline:
    """Ordered filter stages; each stage sees the previous stage's output."""

    stages: Tuple[FilterStage, ...]

    def __post_init__(self) -> None:
        if not self.stages:
            raise ValueError("flag filter pipeline requires at least one stage")

    def run(self, flags: str, token_filter: FlagFilter) -> str:
        return reduce(lambda current, stage: stage.apply(current, token_filter), self.stages, flags)


def combine_exports(exports: Iterable[str]) -> str:
    """Join raw export strings, each followed by a single space."""

    return "".join(f"{entry} " for entry in exports)


CFLAGS_ONLY_I = FlagFilterPipeline((FilterStage(FilterMode.INCLUDE, INCLUDE_PATH_MARKER, strip_prefix=True),))
CFLAGS_ONLY_OTHER = FlagFilterPipeline((FilterStage(FilterMode.EXCLUDE, INCLUDE_PATH_MARKER),))
LIBS_ONLY_L = FlagFilterPipeline((FilterStage(FilterMode.INCLUDE, LIBRARY_PATH_MARKER, strip_prefix=True),))
LIBS_ONLY_LOWER_L = FlagFilterPipeline(
    (FilterStage(FilterMode.INCLUDE, LIBRARY_NAME_MARKER, strip_prefix=True, dedup=True),)
)
# Library-path tokens go first; the name pass runs on the path-stripped string.
LIBS_ONLY_OTHER = FlagFilterPipeline(
    (
        FilterStage(FilterMode.EXCLUDE, LIBRARY_PATH_MARKER),
        FilterStage(FilterMode.EXCLUDE, LIBRARY_NAME_MARKER),
    )
)


__all__ = [
    "BUILD_LANGUAGE",
    "CFLAGS_ONLY_I",
    "CFLAGS_ONLY_OTHER",
    "FilterMode",
    "FilterStage",
    "FlagFilterPipeline",
    "INCLUDE_PATH_MARKER",
    "LIBRARY_NAME_MARKER",
    "LIBRARY_PATH_MARKER",
    "LIBS_ONLY_L",
    "LIBS_ONLY_LOWER_L",
    "LIBS_ONLY_OTHER",
    "combine_exports",
]
