"""Static command table shared by both personas."""

from __future__ import annotations

from typing import Tuple

from wsquery.domain import flags
from wsquery.domain.commands.value_objects import (
    ALL_OPTIONS,
    ARG_ATTRIB,
    ARG_LANG,
    ARG_NAME,
    ARG_TARGET,
    ATTRIB,
    DEPS_ONLY,
    LANG,
    LENGTH,
    PACKAGE,
    TARGET,
    TOP,
    ZOMBIE_ONLY,
    CommandDescriptor,
    CrawlPolicy,
    OutputJoin,
    Persona,
)

PACKAGE_ONLY = frozenset({Persona.PACKAGE})
STACK_ONLY = frozenset({Persona.STACK})

# Pseudo-package every language binding depends on.
LANG_SUPPORT_PACKAGE = "roslang"

_SINGLE_TARGET = ALL_OPTIONS - {PACKAGE}
_EXPORT_FORBIDS = frozenset({TARGET, TOP, LENGTH, ZOMBIE_ONLY})
_PLUGINS_FORBIDS = frozenset({TARGET, LENGTH, ZOMBIE_ONLY})
_PROFILE_FORBIDS = frozenset({PACKAGE, TARGET, TOP, DEPS_ONLY, LANG, ATTRIB})


def _closure(
    name: str,
    operation: str,
    *,
    alias: str | None = None,
    direct: bool = False,
    **extra,
) -> CommandDescriptor:
    return CommandDescriptor(
        name=name,
        operation=operation,
        aliases=frozenset({alias}) if alias else frozenset(),
        requires=(ARG_NAME,),
        forbids=_SINGLE_TARGET,
        params={"direct": direct},
        **extra,
    )


def _contains(name: str, field: str) -> CommandDescriptor:
    # the argument names a package even under the stack persona
    return CommandDescriptor(
        name=name,
        operation="contains",
        personas=STACK_ONLY,
        requires=(ARG_NAME,),
        forbids=_SINGLE_TARGET,
        params={"field": field},
        noun="package",
    )


def _flags(name: str, attrib: str, pipeline: flags.FlagFilterPipeline) -> CommandDescriptor:
    return CommandDescriptor(
        name=name,
        operation="flags",
        personas=PACKAGE_ONLY,
        requires=(ARG_NAME,),
        forbids=_EXPORT_FORBIDS,
        params={"attrib": attrib, "pipeline": pipeline},
    )


COMMANDS: Tuple[CommandDescriptor, ...] = (
    CommandDescriptor(
        name="help",
        operation="usage",
        forbids=ALL_OPTIONS - {TARGET},
        output=OutputJoin.RAW,
        crawl=CrawlPolicy.SKIP,
    ),
    CommandDescriptor(name="profile", operation="profile", forbids=_PROFILE_FORBIDS, crawl=CrawlPolicy.SELF),
    CommandDescriptor(name="find", operation="find", requires=(ARG_NAME,), forbids=_SINGLE_TARGET),
    CommandDescriptor(name="list", operation="list", output=OutputJoin.STRUCTURED_PAIR),
    CommandDescriptor(name="list-names", operation="list_names"),
    CommandDescriptor(name="list-duplicates", operation="list_duplicates", crawl=CrawlPolicy.FORCE),
    CommandDescriptor(
        name="langs",
        operation="langs",
        personas=PACKAGE_ONLY,
        output=OutputJoin.SPACE_JOINED,
        crawl=CrawlPolicy.FORCE,
        params={"pseudo_package": LANG_SUPPORT_PACKAGE},
    ),
    _closure("depends", "deps", alias="deps"),
    _closure("depends1", "deps", alias="deps1", direct=True),
    _closure("depends-manifests", "deps_manifests", alias="deps-manifests", output=OutputJoin.SPACE_JOINED),
    _closure(
        "depends-msgsrv",
        "deps_msgsrv",
        alias="deps-msgsrv",
        personas=PACKAGE_ONLY,
        output=OutputJoin.SPACE_JOINED,
    ),
    _closure("depends-indent", "deps_indent", alias="deps-indent"),
    CommandDescriptor(
        name="depends-why",
        operation="deps_why",
        aliases=frozenset({"deps-why"}),
        requires=(ARG_NAME, ARG_TARGET),
        forbids=ALL_OPTIONS - {PACKAGE, TARGET},
        output=OutputJoin.RAW,
    ),
    _closure("rosdep", "rosdeps", alias="rosdeps", personas=PACKAGE_ONLY),
    _closure("rosdep0", "rosdeps", alias="rosdeps0", direct=True, personas=PACKAGE_ONLY),
    _closure("vcs", "vcs", personas=PACKAGE_ONLY),
    _closure("vcs0", "vcs", direct=True, personas=PACKAGE_ONLY),
    _closure("depends-on", "depends_on", crawl=CrawlPolicy.FORCE),
    _closure("depends-on1", "depends_on", direct=True, crawl=CrawlPolicy.FORCE),
    CommandDescriptor(
        name="export",
        operation="export",
        personas=PACKAGE_ONLY,
        requires=(ARG_NAME, ARG_LANG, ARG_ATTRIB),
        forbids=_EXPORT_FORBIDS,
        output=OutputJoin.SPACE_JOINED,
    ),
    CommandDescriptor(
        name="plugins",
        operation="plugins",
        personas=PACKAGE_ONLY,
        requires=(ARG_NAME, ARG_ATTRIB),
        forbids=_PLUGINS_FORBIDS,
    ),
    _flags("cflags-only-I", "cflags", flags.CFLAGS_ONLY_I),
    _flags("cflags-only-other", "cflags", flags.CFLAGS_ONLY_OTHER),
    _flags("libs-only-L", "lflags", flags.LIBS_ONLY_L),
    _flags("libs-only-l", "lflags", flags.LIBS_ONLY_LOWER_L),
    _flags("libs-only-other", "lflags", flags.LIBS_ONLY_OTHER),
    CommandDescriptor(
        name="contents", operation="contents", personas=STACK_ONLY, requires=(ARG_NAME,), forbids=_SINGLE_TARGET
    ),
    _contains("contains", "name"),
    _contains("contains-path", "path"),
)


__all__ = ["COMMANDS", "LANG_SUPPORT_PACKAGE", "PACKAGE_ONLY", "STACK_ONLY"]
