"""Command grammar exports."""

from .grammar import (
    CollaboratorError,
    CommandGrammar,
    DispatchError,
    InvalidOptionError,
    MissingArgumentError,
    UnknownCommandError,
)
from .table import COMMANDS, LANG_SUPPORT_PACKAGE
from .value_objects import (
    CommandDescriptor,
    CrawlPolicy,
    Invocation,
    OptionSet,
    OutputJoin,
    Persona,
)

__all__ = [
    "COMMANDS",
    "CollaboratorError",
    "CommandDescriptor",
    "CommandGrammar",
    "CrawlPolicy",
    "DispatchError",
    "InvalidOptionError",
    "Invocation",
    "LANG_SUPPORT_PACKAGE",
    "MissingArgumentError",
    "OptionSet",
    "OutputJoin",
    "Persona",
    "UnknownCommandError",
]
