from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from dfa_sim.engine import InvalidInputSymbol, is_accepted
from dfa_sim.event_sink import InMemoryEventSink
from dfa_sim.models import Automaton
from dfa_sim.reporting import event_to_dict
from dfa_sim.textbook import CATALOG


def _parse_symbols(raw: str, automaton: Automaton) -> list[Any]:
    """Split a comma-separated word and map each token onto the alphabet.

    Tokens are matched against str(symbol). Unmatched tokens are passed through
    unchanged so the engine reports them as invalid input symbols.
    """
    if not raw.strip():
        return []
    by_text = {str(a): a for a in automaton.alphabet}
    return [by_text.get(tok.strip(), tok.strip()) for tok in raw.split(",")]


def _cmd_list(args: argparse.Namespace) -> int:
    width = max(len(name) for name in CATALOG)
    for name, entry in CATALOG.items():
        print(f"{name.ljust(width)}  {entry.description}")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    entry = CATALOG.get(str(args.example))
    if entry is None:
        print(
            f"ERROR: unknown example {args.example!r}; choose one of: {', '.join(CATALOG)}",
            file=sys.stderr,
        )
        return 2

    automaton = entry.factory()
    symbols = _parse_symbols(str(args.input), automaton)
    sink = InMemoryEventSink() if args.events else None

    try:
        trace = is_accepted(automaton, symbols, event_sink=sink)
    except InvalidInputSymbol as e:
        print(f"ERROR: invalid input: {e}", file=sys.stderr)
        return 2

    accepted = trace.print_and_accept(sys.stdout)

    if sink is not None:
        for e in sink.events:
            sys.stdout.write(json.dumps(event_to_dict(e)) + "\n")

    return 0 if accepted else 1


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="dfa_sim",
        description=(
            "DFA Simulator: user harness.\n"
            "\n"
            "Runs a built-in textbook automaton over an input word and prints the run trace."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each transition at DEBUG level.")

    sub = parser.add_subparsers(dest="command", required=True)

    lst = sub.add_parser("list", help="List the built-in automata.")
    lst.set_defaults(func=_cmd_list)

    run = sub.add_parser("run", help="Simulate a built-in automaton and print the run trace.")
    run.add_argument("--example", type=str, required=True, help="Built-in automaton name (see `list`).")
    run.add_argument(
        "--input",
        type=str,
        required=True,
        help="Comma-separated input symbols, e.g. 1,0,0. Use an empty string for the empty word.",
    )
    run.add_argument("--events", action="store_true", help="Also print the run's event stream as JSON lines.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
