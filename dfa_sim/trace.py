from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

from dfa_sim.models import Automaton

# The start state is recorded twice before any symbol is consumed.
INITIAL_ENTRIES = 2


@dataclass(frozen=True)
class PathEntry:
    state: Any
    # Symbol consumed to reach `state`; None for the initial entries.
    symbol: Any
    # repr(symbol) for consumed symbols, repr(state) or "" for the initial entries.
    label: str


@dataclass(frozen=True)
class RunTrace:
    """
    Result of one simulation run.

    Holds a reference to the automaton (immutable, so no copy is taken) for
    reporting the accepting-state set alongside the verdict.
    """

    automaton: Automaton
    path: tuple[PathEntry, ...]
    accepted: bool

    @property
    def accepting_states(self) -> tuple[Any, ...]:
        return self.automaton.accepting_states

    @property
    def final_state(self) -> Any:
        return self.path[-1].state

    @property
    def consumed(self) -> int:
        """Number of input symbols consumed before the run ended."""
        return len(self.path) - INITIAL_ENTRIES

    def states(self) -> list[Any]:
        return [entry.state for entry in self.path]

    def print_and_accept(self, out: TextIO | None = None) -> bool:
        """Write the rendered trace to `out` (default stdout) and return the verdict."""
        from dfa_sim.reporting import render_trace

        stream = out if out is not None else sys.stdout
        stream.write(render_trace(self))
        return self.accepted
