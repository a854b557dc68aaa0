"""Command dispatch for the wspack / wsstack tools."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass

from wsquery.adapters.token_filter import TokenFlagFilter
from wsquery.app.handlers import HANDLERS, HandlerContext
from wsquery.app.rendering import render
from wsquery.domain.commands.grammar import CollaboratorError, CommandGrammar, DispatchError
from wsquery.domain.commands.value_objects import CrawlPolicy, Invocation, OptionSet, Persona
from wsquery.ports.flag_filter import FlagFilter
from wsquery.ports.package_index import PackageIndex
from wsquery.settings import RuntimeSettings
from wsquery.utils.telemetry import record_structured_event


@dataclass(frozen=True)
class DispatchResult:
    success: bool
    output: str = ""
    error: str | None = None
    kind: str | None = None
    command: str | None = None

    @classmethod
    def failure(cls, exc: DispatchError, command: str | None = None) -> "DispatchResult":
        return cls(success=False, error=str(exc), kind=exc.kind, command=command)


class Dispatcher:
    """Validate an option set and route it to the package index.

    The persona is taken from the index at construction and never changes.
    ``dispatch`` reports every failure through ``DispatchResult``; nothing
    is written to the output when a command fails.
    """

    def __init__(
        self,
        index: PackageIndex,
        settings: RuntimeSettings,
        *,
        flag_filter: FlagFilter | None = None,
        grammar: CommandGrammar | None = None,
        lang_disable: str | None = None,
    ) -> None:
        self._index = index
        self._settings = settings
        self._persona = index.persona
        self._grammar = grammar or CommandGrammar()
        self._context = HandlerContext(
            index=index,
            flag_filter=flag_filter or TokenFlagFilter(),
            lang_disable=lang_disable if lang_disable is not None else settings.lang_disable,
        )

    @property
    def persona(self) -> Persona:
        return self._persona

    @property
    def grammar(self) -> CommandGrammar:
        return self._grammar

    def dispatch(self, options: OptionSet) -> DispatchResult:
        started = time.perf_counter()
        command: str | None = None
        try:
            invocation = self._grammar.validate(self._persona, options)
            command = invocation.command
            result = DispatchResult(success=True, output=self._execute(invocation), command=command)
        except DispatchError as exc:
            result = DispatchResult.failure(exc, command)
        try:
            self._record(options, result, started)
        except OSError:
            # event dropped; the command result stands
            pass
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute(self, invocation: Invocation) -> str:
        descriptor = invocation.descriptor
        handler = HANDLERS[descriptor.operation]
        context = self._context
        try:
            self._index.set_quiet(invocation.quiet)
            if descriptor.crawl is not CrawlPolicy.SKIP:
                search_path = self._index.search_path()
                context = dataclasses.replace(context, search_path=tuple(search_path))
                # profile performs its own crawl
                if descriptor.crawl is not CrawlPolicy.SELF:
                    self._index.crawl(search_path, descriptor.crawl is CrawlPolicy.FORCE)
            return render(descriptor.output, handler(context, invocation, **descriptor.params))
        except Exception as exc:
            raise CollaboratorError(str(exc)) from exc

    def _record(self, options: OptionSet, result: DispatchResult, started: float) -> None:
        record_structured_event(
            self._settings,
            "dispatch",
            payload={
                "persona": self._persona.value,
                "invoked": options.command,
                "command": result.command,
                "kind": result.kind,
            },
            level="info" if result.success else "warn",
            status="ok" if result.success else "error",
            component="dispatcher",
            duration_ms=(time.perf_counter() - started) * 1000,
        )


__all__ = ["DispatchResult", "Dispatcher"]
