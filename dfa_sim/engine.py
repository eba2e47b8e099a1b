from __future__ import annotations

import logging
from typing import Any, Iterable

from dfa_sim.event_sink import EventSink
from dfa_sim.events import EventType
from dfa_sim.models import Automaton
from dfa_sim.trace import PathEntry, RunTrace

logger = logging.getLogger(__name__)


class SimulationContractError(AssertionError):
    """Base for fatal contract violations detected during a run."""


class InvalidInputSymbol(SimulationContractError):
    """Raised when the input contains a symbol outside the alphabet."""

    def __init__(self, symbol: Any, position: int) -> None:
        super().__init__(f"input[{position}]={symbol!r} is not in the alphabet")
        self.symbol = symbol
        self.position = position


class InvalidTransitionTarget(SimulationContractError):
    """Raised when the transition function produces a state outside Q."""

    def __init__(self, state: Any, symbol: Any, target: Any) -> None:
        super().__init__(
            f"transition({state!r}, {symbol!r}) returned {target!r}, which is not in states"
        )
        self.state = state
        self.symbol = symbol
        self.target = target


def is_accepted(
    automaton: Automaton,
    symbols: Iterable[Any],
    event_sink: EventSink | None = None,
) -> RunTrace:
    """
    Run the automaton over `symbols` and return the full trace.

    M accepts w = w1..wn if there is a sequence of states r0..rn with:
      1. r0 = q0
      2. delta(r_i, w_i+1) = r_i+1 for i = 0..n-1
      3. r_n in F

    Rules:
    - Every symbol must be in the alphabet; checked before any transition.
    - An undefined transition rejects immediately; later symbols are not read.
    - A defined transition must land inside Q.
    """
    word = list(symbols)
    for i, a in enumerate(word):
        if not automaton.has_symbol(a):
            raise InvalidInputSymbol(a, i)

    if event_sink is not None:
        event_sink.start_run()
        event_sink.emit(EventType.RUN_START, state=automaton.start_state, length=len(word))

    # r0 = q0
    state = automaton.start_state
    # Each entry is (state, input that took us to that state)
    path: list[PathEntry] = [
        PathEntry(state=state, symbol=None, label=repr(state)),
        PathEntry(state=state, symbol=None, label=""),
    ]
    accepted = automaton.is_accepting(state)

    for i, symbol in enumerate(word):
        next_state = automaton.step(state, symbol)

        if next_state is None:
            logger.debug("no transition from %r on %r at input[%d]; rejecting", state, symbol, i)
            if event_sink is not None:
                event_sink.emit(EventType.UNDEFINED_TRANSITION, state=state, symbol=symbol, position=i)
                event_sink.emit(EventType.RUN_END, state=state, accepted=False, consumed=i)
            return RunTrace(automaton=automaton, path=tuple(path), accepted=False)

        # We have no control over the transition function, so check its result is in Q
        if not automaton.has_state(next_state):
            raise InvalidTransitionTarget(state, symbol, next_state)

        logger.debug("%r --%r--> %r", state, symbol, next_state)
        if event_sink is not None:
            event_sink.emit(
                EventType.TRANSITION,
                state=next_state,
                symbol=symbol,
                source=state,
                position=i,
            )

        state = next_state
        accepted = automaton.is_accepting(state)
        path.append(PathEntry(state=state, symbol=symbol, label=repr(symbol)))

    # r_n in F
    accepted = automaton.is_accepting(state)

    if event_sink is not None:
        event_sink.emit(EventType.RUN_END, state=state, accepted=accepted, consumed=len(word))
    logger.debug("run ended in %r after %d symbols: %s", state, len(word), "accept" if accepted else "reject")

    return RunTrace(automaton=automaton, path=tuple(path), accepted=accepted)
