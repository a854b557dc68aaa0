from __future__ import annotations

import pytest

from wsquery.domain.commands import (
    COMMANDS,
    CommandDescriptor,
    CommandGrammar,
    InvalidOptionError,
    MissingArgumentError,
    OptionSet,
    Persona,
    UnknownCommandError,
)
from wsquery.domain.commands.grammar import DEFAULT_PROFILE_LENGTH, UNBOUNDED_LENGTH


@pytest.fixture
def grammar() -> CommandGrammar:
    return CommandGrammar()


def test_table_covers_both_personas(grammar: CommandGrammar) -> None:
    package_names = {descriptor.name for descriptor in grammar.visible(Persona.PACKAGE)}
    stack_names = {descriptor.name for descriptor in grammar.visible(Persona.STACK)}
    assert {"langs", "export", "plugins", "libs-only-other", "rosdep0", "vcs0"} <= package_names
    assert {"contents", "contains", "contains-path"} <= stack_names
    assert "langs" not in stack_names
    assert "contents" not in package_names
    assert len(COMMANDS) == 29


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("deps", "depends"),
        ("deps1", "depends1"),
        ("depends1", "depends1"),
        ("deps-manifests", "depends-manifests"),
        ("deps-indent", "depends-indent"),
        ("deps-why", "depends-why"),
        ("rosdeps", "rosdep"),
        ("rosdeps0", "rosdep0"),
    ],
)
def test_aliases_resolve_to_canonical(grammar: CommandGrammar, alias: str, canonical: str) -> None:
    assert grammar.resolve(Persona.PACKAGE, alias).name == canonical


def test_direct_variants_share_operation(grammar: CommandGrammar) -> None:
    depends = grammar.resolve(Persona.PACKAGE, "depends")
    depends1 = grammar.resolve(Persona.PACKAGE, "deps1")
    depends_on1 = grammar.resolve(Persona.PACKAGE, "depends-on1")
    assert depends.operation == depends1.operation == "deps"
    assert depends.params["direct"] is False
    assert depends1.params["direct"] is True
    assert depends_on1.params["direct"] is True


def test_stack_commands_carry_only_their_params(grammar: CommandGrammar) -> None:
    assert dict(grammar.resolve(Persona.STACK, "contents").params) == {}
    assert dict(grammar.resolve(Persona.STACK, "contains").params) == {"field": "name"}
    assert dict(grammar.resolve(Persona.STACK, "contains-path").params) == {"field": "path"}


def test_persona_gating_reports_unknown_command(grammar: CommandGrammar) -> None:
    with pytest.raises(UnknownCommandError, match="command langs not implemented"):
        grammar.resolve(Persona.STACK, "langs")
    with pytest.raises(UnknownCommandError, match="command contents not implemented"):
        grammar.resolve(Persona.PACKAGE, "contents")


def test_unknown_and_empty_commands(grammar: CommandGrammar) -> None:
    with pytest.raises(UnknownCommandError, match="frobnicate"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="frobnicate"))
    with pytest.raises(UnknownCommandError, match="Try 'wsstack help'"):
        grammar.validate(Persona.STACK, OptionSet())


def test_missing_name_phrasing_follows_persona(grammar: CommandGrammar) -> None:
    with pytest.raises(MissingArgumentError, match="^no package given$"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="find"))
    with pytest.raises(MissingArgumentError, match="^no stack given$"):
        grammar.validate(Persona.STACK, OptionSet(command="find"))
    # contains takes a package even under the stack persona
    with pytest.raises(MissingArgumentError, match="^no package given$"):
        grammar.validate(Persona.STACK, OptionSet(command="contains"))


def test_depends_why_reports_missing_target(grammar: CommandGrammar) -> None:
    with pytest.raises(MissingArgumentError, match="^no target given$"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="depends-why", package="roscpp"))
    with pytest.raises(MissingArgumentError, match="^no package given$"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="deps-why", target="roslib"))


def test_export_requires_lang_and_attrib(grammar: CommandGrammar) -> None:
    with pytest.raises(MissingArgumentError, match="no lang given"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="export", package="roscpp", attrib="cflags"))
    with pytest.raises(MissingArgumentError, match="no attrib given"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="export", package="roscpp", lang="cpp"))


def test_required_checked_before_forbidden(grammar: CommandGrammar) -> None:
    with pytest.raises(MissingArgumentError):
        grammar.validate(Persona.PACKAGE, OptionSet(command="find", top="rviz"))


def test_forbidden_option_names_the_flag(grammar: CommandGrammar) -> None:
    with pytest.raises(InvalidOptionError, match="--top"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="find", package="roscpp", top="rviz"))


def test_inferred_package_is_not_an_option(grammar: CommandGrammar) -> None:
    invocation = grammar.validate(Persona.PACKAGE, OptionSet(command="list", package="roscpp"))
    assert invocation.command == "list"
    with pytest.raises(InvalidOptionError, match="--package"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="list", package="roscpp", package_given=True))


def test_help_accepts_target_only(grammar: CommandGrammar) -> None:
    grammar.validate(Persona.PACKAGE, OptionSet(command="help", target="ignored"))
    with pytest.raises(InvalidOptionError):
        grammar.validate(Persona.PACKAGE, OptionSet(command="help", deps_only=True))


def test_plugins_allows_top_and_deps_only(grammar: CommandGrammar) -> None:
    invocation = grammar.validate(
        Persona.PACKAGE,
        OptionSet(command="plugins", package="rviz", attrib="plugin", top="nav", deps_only=True),
    )
    assert invocation.top == "nav"
    with pytest.raises(InvalidOptionError):
        grammar.validate(Persona.PACKAGE, OptionSet(command="plugins", package="rviz", attrib="plugin", length="3"))


def test_profile_length_defaults(grammar: CommandGrammar) -> None:
    plain = grammar.validate(Persona.PACKAGE, OptionSet(command="profile"))
    zombies = grammar.validate(Persona.PACKAGE, OptionSet(command="profile", zombie_only=True))
    explicit = grammar.validate(Persona.PACKAGE, OptionSet(command="profile", zombie_only=True, length="5"))
    assert plain.length == DEFAULT_PROFILE_LENGTH == 20
    assert zombies.length == UNBOUNDED_LENGTH == -1
    assert explicit.length == 5


def test_profile_rejects_non_numeric_length(grammar: CommandGrammar) -> None:
    with pytest.raises(InvalidOptionError, match="--length=many"):
        grammar.validate(Persona.PACKAGE, OptionSet(command="profile", length="many"))


def test_alias_collision_is_rejected() -> None:
    first = CommandDescriptor(name="depends", operation="deps", aliases=frozenset({"deps"}))
    second = CommandDescriptor(name="deps", operation="deps")
    with pytest.raises(ValueError, match="claimed by both"):
        CommandGrammar([first, second])


def test_same_name_allowed_in_disjoint_personas() -> None:
    package_only = CommandDescriptor(name="show", operation="find", personas=frozenset({Persona.PACKAGE}))
    stack_only = CommandDescriptor(name="show", operation="contents", personas=frozenset({Persona.STACK}))
    grammar = CommandGrammar([package_only, stack_only])
    assert grammar.resolve(Persona.PACKAGE, "show").operation == "find"
    assert grammar.resolve(Persona.STACK, "show").operation == "contents"


def test_descriptor_params_are_read_only(grammar: CommandGrammar) -> None:
    descriptor = grammar.resolve(Persona.PACKAGE, "depends")
    with pytest.raises(TypeError):
        descriptor.params["direct"] = True  # type: ignore[index]
