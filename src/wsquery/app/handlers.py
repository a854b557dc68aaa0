"""Operations invoked for validated commands.

Each handler receives the collaborators, the validated invocation and the
descriptor's ``params``, and returns a value shaped for the descriptor's
output policy (a sequence of items, a sequence of pairs, or a raw string).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from wsquery.domain.commands.value_objects import Invocation
from wsquery.domain.flags import BUILD_LANGUAGE, FlagFilterPipeline, combine_exports
from wsquery.ports.flag_filter import FlagFilter
from wsquery.ports.package_index import PackageIndex


@dataclass(frozen=True)
class HandlerContext:
    index: PackageIndex
    flag_filter: FlagFilter
    lang_disable: str | None = None
    search_path: Sequence[str] = ()


Handler = Callable[..., Any]


def excluded_languages(raw: str | None) -> List[str]:
    """Split a colon-delimited exclusion list, ignoring empty segments."""

    if not raw:
        return []
    return [segment for segment in raw.split(":") if segment]


def _usage(ctx: HandlerContext, inv: Invocation) -> str:
    return ctx.index.usage()


def _profile(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return ctx.index.profile(ctx.search_path, inv.zombie_only, inv.length)


def _find(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return [ctx.index.find(inv.name)]


def _list(ctx: HandlerContext, inv: Invocation) -> List[tuple[str, str]]:
    return ctx.index.list()


def _list_names(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return [name for name, _path in ctx.index.list()]


def _list_duplicates(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return ctx.index.list_duplicates()


def _langs(ctx: HandlerContext, inv: Invocation, *, pseudo_package: str) -> List[str]:
    dependents = ctx.index.depends_on(pseudo_package, True)
    disabled = set(excluded_languages(ctx.lang_disable))
    return [lang for lang in dependents if lang not in disabled]


def _deps(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.deps(inv.name, direct)


def _deps_manifests(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.deps_manifests(inv.name, direct)


def _deps_msgsrv(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.deps_msgsrv(inv.name, direct)


def _deps_indent(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.deps_indent(inv.name, direct)


def _deps_why(ctx: HandlerContext, inv: Invocation) -> str:
    return ctx.index.deps_why(inv.name, inv.target)


def _rosdeps(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.rosdeps(inv.name, direct)


def _vcs(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.vcs(inv.name, direct)


def _depends_on(ctx: HandlerContext, inv: Invocation, *, direct: bool) -> List[str]:
    return ctx.index.depends_on(inv.name, direct)


def _export(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return ctx.index.exports(inv.name, inv.lang, inv.attrib, inv.deps_only)


def _plugins(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return ctx.index.plugins(inv.name, inv.attrib, inv.top)


def _flags(ctx: HandlerContext, inv: Invocation, *, attrib: str, pipeline: FlagFilterPipeline) -> List[str]:
    raw = combine_exports(ctx.index.exports(inv.name, BUILD_LANGUAGE, attrib, inv.deps_only))
    return [pipeline.run(raw, ctx.flag_filter)]


def _contents(ctx: HandlerContext, inv: Invocation) -> List[str]:
    return ctx.index.contents(inv.name)


def _contains(ctx: HandlerContext, inv: Invocation, *, field: str) -> List[str]:
    stack_name, stack_path = ctx.index.contains(inv.name)
    return [stack_name if field == "name" else stack_path]


HANDLERS: Dict[str, Handler] = {
    "usage": _usage,
    "profile": _profile,
    "find": _find,
    "list": _list,
    "list_names": _list_names,
    "list_duplicates": _list_duplicates,
    "langs": _langs,
    "deps": _deps,
    "deps_manifests": _deps_manifests,
    "deps_msgsrv": _deps_msgsrv,
    "deps_indent": _deps_indent,
    "deps_why": _deps_why,
    "rosdeps": _rosdeps,
    "vcs": _vcs,
    "depends_on": _depends_on,
    "export": _export,
    "plugins": _plugins,
    "flags": _flags,
    "contents": _contents,
    "contains": _contains,
}


__all__ = ["HANDLERS", "Handler", "HandlerContext", "excluded_languages"]
