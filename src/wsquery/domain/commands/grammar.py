"""Command resolution and option validation."""

from __future__ import annotations

from typing import Dict, Iterable, List

from wsquery.domain.commands.table import COMMANDS
from wsquery.domain.commands.value_objects import (
    ARG_NAME,
    ARG_TARGET,
    ARGUMENT_ORDER,
    LENGTH,
    CommandDescriptor,
    Invocation,
    OptionSet,
    Persona,
)

DEFAULT_PROFILE_LENGTH = 20
UNBOUNDED_LENGTH = -1


class DispatchError(RuntimeError):
    """Base class for failures reported by the dispatcher."""

    kind = "dispatch"


class UnknownCommandError(DispatchError):
    kind = "unknown-command"


class MissingArgumentError(DispatchError):
    kind = "missing-argument"


class InvalidOptionError(DispatchError):
    kind = "invalid-option"


class CollaboratorError(DispatchError):
    """A collaborator (index, filter, filesystem) failed; message kept verbatim."""

    kind = "collaborator"


class CommandGrammar:
    """Per-persona view over the command table.

    Every descriptor is indexed under its canonical name and aliases for each
    persona it is visible to. A name shared by two descriptors of the same
    persona is rejected at construction time.
    """

    def __init__(self, descriptors: Iterable[CommandDescriptor] = COMMANDS) -> None:
        self._descriptors = tuple(descriptors)
        self._index: Dict[Persona, Dict[str, CommandDescriptor]] = {persona: {} for persona in Persona}
        for descriptor in self._descriptors:
            for persona in descriptor.personas:
                names = self._index[persona]
                for name in descriptor.names:
                    existing = names.get(name)
                    if existing is not None:
                        raise ValueError(
                            f"Command name {name} claimed by both {existing.name} and {descriptor.name} "
                            f"for the {persona.noun} persona"
                        )
                    names[name] = descriptor

    @property
    def descriptors(self) -> tuple[CommandDescriptor, ...]:
        return self._descriptors

    def visible(self, persona: Persona) -> List[CommandDescriptor]:
        return [descriptor for descriptor in self._descriptors if descriptor.visible_to(persona)]

    def resolve(self, persona: Persona, command: str) -> CommandDescriptor:
        if not command:
            raise UnknownCommandError(f"no command given.  Try '{persona.tool} help'")
        descriptor = self._index[persona].get(command)
        if descriptor is None:
            raise UnknownCommandError(f"command {command} not implemented")
        return descriptor

    def validate(self, persona: Persona, options: OptionSet) -> Invocation:
        descriptor = self.resolve(persona, options.command)

        for key in ARGUMENT_ORDER:
            if key in descriptor.requires and not options.argument(key):
                raise MissingArgumentError(_missing_message(persona, descriptor, key))

        rejected = sorted(options.present() & descriptor.forbids)
        if rejected:
            spelled = ", ".join(f"--{option}" for option in rejected)
            raise InvalidOptionError(f"invalid option(s) given: {spelled}")

        return Invocation(
            descriptor=descriptor,
            persona=persona,
            invoked_as=options.command,
            name=options.package,
            target=options.target,
            lang=options.lang,
            attrib=options.attrib,
            top=options.top,
            length=_effective_length(options),
            deps_only=options.deps_only,
            zombie_only=options.zombie_only,
            quiet=options.quiet,
        )


def _missing_message(persona: Persona, descriptor: CommandDescriptor, key: str) -> str:
    if key == ARG_NAME:
        return f"no {descriptor.noun or persona.noun} given"
    if key == ARG_TARGET:
        return "no target given"
    return f"no {key} given"


def _effective_length(options: OptionSet) -> int:
    if options.length:
        try:
            return int(options.length)
        except ValueError as exc:
            raise InvalidOptionError(f"invalid option(s) given: --{LENGTH}={options.length}") from exc
    return UNBOUNDED_LENGTH if options.zombie_only else DEFAULT_PROFILE_LENGTH


__all__ = [
    "CollaboratorError",
    "CommandGrammar",
    "DEFAULT_PROFILE_LENGTH",
    "DispatchError",
    "InvalidOptionError",
    "MissingArgumentError",
    "UNBOUNDED_LENGTH",
    "UnknownCommandError",
]
