"""Value objects describing the command grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple


class Persona(str, Enum):
    PACKAGE = "package"
    STACK = "stack"

    @property
    def noun(self) -> str:
        return self.value

    @property
    def tool(self) -> str:
        return "wspack" if self is Persona.PACKAGE else "wsstack"


BOTH_PERSONAS: FrozenSet[Persona] = frozenset({Persona.PACKAGE, Persona.STACK})


class OutputJoin(str, Enum):
    PER_LINE = "per-line"
    SPACE_JOINED = "space-joined"
    RAW = "raw"
    STRUCTURED_PAIR = "structured-pair"


class CrawlPolicy(str, Enum):
    """How a command interacts with the package index before it runs."""

    SKIP = "skip"
    SELF = "self"
    REUSE = "reuse"
    FORCE = "force"


# Option names as operators spell them on the command line.
PACKAGE = "package"
TARGET = "target"
TOP = "top"
LENGTH = "length"
ZOMBIE_ONLY = "zombie-only"
DEPS_ONLY = "deps-only"
LANG = "lang"
ATTRIB = "attrib"

ALL_OPTIONS: FrozenSet[str] = frozenset({PACKAGE, TARGET, TOP, LENGTH, ZOMBIE_ONLY, DEPS_ONLY, LANG, ATTRIB})

# Required argument keys, checked in this order.
ARG_NAME = "name"
ARG_TARGET = "target"
ARG_LANG = "lang"
ARG_ATTRIB = "attrib"
ARGUMENT_ORDER: Tuple[str, ...] = (ARG_NAME, ARG_TARGET, ARG_LANG, ARG_ATTRIB)


@dataclass(frozen=True)
class OptionSet:
    """Options as produced by the command-line parser.

    ``package`` may have been inferred from the working directory; only
    ``package_given`` tells whether the operator typed it.
    """

    command: str = ""
    package: str = ""
    package_given: bool = False
    target: str = ""
    deps_only: bool = False
    lang: str = ""
    attrib: str = ""
    top: str = ""
    length: str = ""
    zombie_only: bool = False
    quiet: bool = False

    def present(self) -> FrozenSet[str]:
        supplied = set()
        if self.package_given:
            supplied.add(PACKAGE)
        if self.target:
            supplied.add(TARGET)
        if self.top:
            supplied.add(TOP)
        if self.length:
            supplied.add(LENGTH)
        if self.zombie_only:
            supplied.add(ZOMBIE_ONLY)
        if self.deps_only:
            supplied.add(DEPS_ONLY)
        if self.lang:
            supplied.add(LANG)
        if self.attrib:
            supplied.add(ATTRIB)
        return frozenset(supplied)

    def argument(self, key: str) -> str:
        if key == ARG_NAME:
            return self.package
        return str(getattr(self, key))


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    operation: str
    personas: FrozenSet[Persona] = BOTH_PERSONAS
    aliases: FrozenSet[str] = frozenset()
    requires: Tuple[str, ...] = ()
    forbids: FrozenSet[str] = ALL_OPTIONS
    output: OutputJoin = OutputJoin.PER_LINE
    crawl: CrawlPolicy = CrawlPolicy.REUSE
    params: Mapping[str, Any] = field(default_factory=dict)
    noun: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset({self.name}) | self.aliases

    def visible_to(self, persona: Persona) -> bool:
        return persona in self.personas


@dataclass(frozen=True)
class Invocation:
    """A validated request, ready for its handler."""

    descriptor: CommandDescriptor
    persona: Persona
    invoked_as: str
    name: str = ""
    target: str = ""
    lang: str = ""
    attrib: str = ""
    top: str = ""
    length: int = 20
    deps_only: bool = False
    zombie_only: bool = False
    quiet: bool = False

    @property
    def command(self) -> str:
        return self.descriptor.name


__all__ = [
    "ALL_OPTIONS",
    "ARGUMENT_ORDER",
    "ARG_ATTRIB",
    "ARG_LANG",
    "ARG_NAME",
    "ARG_TARGET",
    "ATTRIB",
    "BOTH_PERSONAS",
    "CommandDescriptor",
    "CrawlPolicy",
    "DEPS_ONLY",
    "Invocation",
    "LANG",
    "LENGTH",
    "OptionSet",
    "OutputJoin",
    "PACKAGE",
    "Persona",
    "TARGET",
    "TOP",
    "ZOMBIE_ONLY",
]
