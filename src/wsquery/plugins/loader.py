"""Runtime selection of the package index backend."""

from __future__ import annotations

from typing import Dict

from wsquery.domain.commands.value_objects import Persona
from wsquery.plugins import ENTRY_POINT_GROUP, IndexFactory, PluginContext, iter_entry_points
from wsquery.ports.package_index import PackageIndex
from wsquery.settings import RuntimeSettings


class IndexBackendNotFoundError(RuntimeError):
    pass


def available_backends() -> Dict[str, IndexFactory]:
    backends: Dict[str, IndexFactory] = {}
    for entry_point in iter_entry_points():
        if entry_point.name in backends:
            raise ValueError(f"Index backend {entry_point.name} already registered")
        backends[entry_point.name] = entry_point.load()
    return backends


def load_index(settings: RuntimeSettings, persona: Persona) -> PackageIndex:
    backends = available_backends()
    if settings.backend:
        factory = backends.get(settings.backend)
        if factory is None:
            raise IndexBackendNotFoundError(
                f"Index backend {settings.backend} not installed (entry point group {ENTRY_POINT_GROUP})"
            )
    elif len(backends) == 1:
        factory = next(iter(backends.values()))
    elif not backends:
        raise IndexBackendNotFoundError(f"No index backend installed (entry point group {ENTRY_POINT_GROUP})")
    else:
        names = ", ".join(sorted(backends))
        raise IndexBackendNotFoundError(
            f"Several index backends installed ({names}); set WSQUERY_INDEX_BACKEND or 'backend' in config.yaml"
        )
    index = factory(PluginContext(settings=settings, persona=persona))
    if index.persona is not persona:
        raise IndexBackendNotFoundError(
            f"Index backend returned a {index.persona.noun} index for the {persona.tool} tool"
        )
    return index
