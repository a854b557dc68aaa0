#!/usr/bin/env python3
"""Entry points for the wspack / wsstack CLIs."""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections import deque
from pathlib import Path

from wsquery import __version__
from wsquery.app.dispatch_service import DispatchResult, Dispatcher
from wsquery.domain.commands.value_objects import OptionSet, Persona
from wsquery.plugins.loader import IndexBackendNotFoundError, load_index
from wsquery.ports.package_index import PackageIndex, PackageIndexError
from wsquery.settings import RuntimeSettings, SettingsError, load_settings
from wsquery.utils.telemetry import clear as telemetry_clear
from wsquery.utils.telemetry import iter_events as telemetry_iter
from wsquery.utils.telemetry import summarize as telemetry_summarize

# Loaded on first use by run() and telemetry_main().
SETTINGS: RuntimeSettings | None = None


def _settings() -> RuntimeSettings:
    global SETTINGS
    if SETTINGS is None:
        SETTINGS = load_settings()
    return SETTINGS


def build_parser(persona: Persona) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=persona.tool,
        description=f"Query the workspace {persona.noun} index. Run '{persona.tool} help' for commands.",
        add_help=False,
    )
    parser.add_argument("command", nargs="?", default="", help="Command to run")
    parser.add_argument(persona.noun, nargs="?", help=f"{persona.noun.capitalize()} name (default: current directory)")
    parser.add_argument("--target", default="", help="Comparison target for depends-why")
    parser.add_argument("--deps-only", action="store_true", help="Only report exports of dependencies")
    parser.add_argument("--lang", default="", help="Export language")
    parser.add_argument("--attrib", default="", help="Export attribute")
    parser.add_argument("--top", default="", help="Top package restricting plugin search")
    parser.add_argument("--length", default="", help="Number of profile entries (default: 20)")
    parser.add_argument("--zombie-only", action="store_true", help="Only profile zombie directories")
    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet error reports")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _options_from_args(args: argparse.Namespace, persona: Persona, index: PackageIndex) -> OptionSet:
    package = getattr(args, persona.noun)
    package_given = package is not None
    if not package_given:
        # commands that need a name fall back to the enclosing package/stack
        package = index.locate(Path(os.getcwd())) or ""
    return OptionSet(
        command=args.command,
        package=package,
        package_given=package_given,
        target=args.target,
        deps_only=args.deps_only,
        lang=args.lang,
        attrib=args.attrib,
        top=args.top,
        length=args.length,
        zombie_only=args.zombie_only,
        quiet=args.quiet,
    )


def _exit_code(result: DispatchResult, options: OptionSet) -> int:
    if not result.success:
        return 1
    # duplicates and zombies are reported, then signalled through the exit status
    if result.command == "list-duplicates" and result.output:
        return 1
    if result.command == "profile" and options.zombie_only and result.output:
        return 1
    return 0


def _error(persona: Persona, message: str, *, quiet: bool) -> None:
    if not quiet:
        print(f"[{persona.tool}] {message}", file=sys.stderr)


def run(persona: Persona, argv: list[str] | None = None) -> int:
    parser = build_parser(persona)
    args = parser.parse_intermixed_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = _settings()
        index = load_index(settings, persona)
        options = _options_from_args(args, persona, index)
    except (SettingsError, IndexBackendNotFoundError, PackageIndexError) as exc:
        _error(persona, str(exc), quiet=args.quiet)
        return 1

    result = Dispatcher(index, settings).dispatch(options)
    if not result.success:
        _error(persona, result.error or "command failed", quiet=options.quiet)
    else:
        sys.stdout.write(result.output)
    return _exit_code(result, options)


def pack_main(argv: list[str] | None = None) -> int:
    return run(Persona.PACKAGE, argv)


def stack_main(argv: list[str] | None = None) -> int:
    return run(Persona.STACK, argv)


def build_telemetry_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wsquery-telemetry", description="Inspect wsquery dispatch telemetry")
    sub = parser.add_subparsers(dest="telemetry_command", required=True)
    report = sub.add_parser("report", help="Summarise recorded dispatches")
    report.add_argument("--recent", type=int, default=0, help="Only summarise the last N events")
    tail = sub.add_parser("tail", help="Print the most recent events")
    tail.add_argument("--limit", type=int, default=20, help="Number of events to print")
    sub.add_parser("clear", help="Delete the telemetry log")
    return parser


def telemetry_main(argv: list[str] | None = None) -> int:
    args = build_telemetry_parser().parse_args(argv)
    try:
        settings = _settings()
    except SettingsError as exc:
        print(f"[wsquery-telemetry] {exc}", file=sys.stderr)
        return 1
    if args.telemetry_command == "report":
        if args.recent and args.recent > 0:
            events = list(deque(telemetry_iter(settings), maxlen=args.recent))
        else:
            events = list(telemetry_iter(settings))
        print(json.dumps(telemetry_summarize(events), indent=2, ensure_ascii=False))
        return 0
    if args.telemetry_command == "tail":
        for evt in deque(telemetry_iter(settings), maxlen=args.limit):
            print(json.dumps(evt, ensure_ascii=False))
        return 0
    telemetry_clear(settings)
    print("Telemetry log cleared")
    return 0


if __name__ == "__main__":
    sys.exit(pack_main())
