"""Discovery hooks for package index backends."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import metadata
from typing import Iterable, Protocol

from wsquery.domain.commands.value_objects import Persona
from wsquery.ports.package_index import PackageIndex
from wsquery.settings import RuntimeSettings

ENTRY_POINT_GROUP = "wsquery.index"


@dataclass(frozen=True)
class PluginContext:
    settings: RuntimeSettings
    persona: Persona


class IndexFactory(Protocol):  # pragma: no cover
    def __call__(self, context: PluginContext) -> PackageIndex:
        ...


def iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=ENTRY_POINT_GROUP)
