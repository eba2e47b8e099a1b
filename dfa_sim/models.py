from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Mapping

Transition = Callable[[Any, Any], Any]


class InvalidAutomaton(ValueError):
    """Raised when the 5-tuple violates q0 in Q or F subset of Q."""


@dataclass(frozen=True)
class TransitionTable:
    """
    Explicit lookup table strategy for the transition function.

    Keys are (state, symbol) pairs. A missing key means no transition is
    defined for that pair, which the engine treats as rejection.
    """

    table: Mapping[tuple[Hashable, Hashable], Any] = field(default_factory=dict)

    def __call__(self, state: Any, symbol: Any) -> Any | None:
        return self.table.get((state, symbol))


@dataclass(frozen=True)
class Automaton:
    """
    A DFA is a 5-tuple (Q, Sigma, delta, q0, F):

      1. Q (states) is a finite set of states
      2. Sigma (alphabet) is a finite set of symbols
      3. delta (transition): Q x Sigma -> Q, partial here (None = undefined)
      4. q0 (start_state) is an element of Q
      5. F (accepting_states) is a subset of Q

    States and symbols only need equality and a repr. Collections are stored
    as tuples and membership is tested by equality.
    """

    states: tuple[Any, ...]
    alphabet: tuple[Any, ...]
    transition: Transition
    start_state: Any
    accepting_states: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        object.__setattr__(self, "accepting_states", tuple(self.accepting_states))

        if isinstance(self.transition, Mapping):
            object.__setattr__(self, "transition", TransitionTable(dict(self.transition)))
        if not callable(self.transition):
            raise InvalidAutomaton("transition must be callable or a (state, symbol) mapping")

        if self.start_state not in self.states:
            raise InvalidAutomaton(f"start_state {self.start_state!r} is not in states")
        for q in self.accepting_states:
            if q not in self.states:
                raise InvalidAutomaton(f"accepting state {q!r} is not in states")

    @classmethod
    def from_table(
        cls,
        *,
        states: Iterable[Any],
        alphabet: Iterable[Any],
        table: Mapping[tuple[Hashable, Hashable], Any],
        start_state: Any,
        accepting_states: Iterable[Any] = (),
    ) -> Automaton:
        return cls(
            states=tuple(states),
            alphabet=tuple(alphabet),
            transition=TransitionTable(dict(table)),
            start_state=start_state,
            accepting_states=tuple(accepting_states),
        )

    def has_state(self, state: Any) -> bool:
        return state in self.states

    def has_symbol(self, symbol: Any) -> bool:
        return symbol in self.alphabet

    def is_accepting(self, state: Any) -> bool:
        return state in self.accepting_states

    def step(self, state: Any, symbol: Any) -> Any | None:
        """Apply delta once. Returns None when the pair has no transition."""
        return self.transition(state, symbol)
