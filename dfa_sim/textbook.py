from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from dfa_sim.models import Automaton


def _figure_1_6_transition(q: int, a: int) -> int | None:
    if q == 1:
        return 1 if a == 0 else 2
    if q == 2:
        return 3 if a == 0 else 2
    if q == 3:
        return 2
    return None


def make_figure_1_6() -> Automaton:
    """
    Sipser, figure 1.6 (page 34).

    A = { w | w contains at least one 1 and an even number of 0s follow the last 1 }
    """
    return Automaton(
        states=(1, 2, 3),
        alphabet=(0, 1),
        transition=_figure_1_6_transition,
        start_state=1,
        accepting_states=(2,),
    )


def make_figure_1_11() -> Automaton:
    """
    Sipser, figure 1.11.

    Strings that start and end with a, or start and end with b.
    """
    return Automaton.from_table(
        states=("s", "q1", "q2", "r1", "r2"),
        alphabet=("a", "b"),
        table={
            ("s", "a"): "q1",
            ("s", "b"): "r1",
            ("q1", "a"): "q1",
            ("q1", "b"): "q2",
            ("q2", "a"): "q1",
            ("q2", "b"): "q2",
            ("r1", "a"): "r2",
            ("r1", "b"): "r1",
            ("r2", "a"): "r2",
            ("r2", "b"): "r1",
        },
        start_state="s",
        accepting_states=("q1", "r1"),
    )


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    description: str
    factory: Callable[[], Automaton]


CATALOG: dict[str, CatalogEntry] = {
    e.name: e
    for e in (
        CatalogEntry(
            name="figure-1.6",
            description="at least one 1 and an even number of 0s after the last 1 (alphabet 0,1)",
            factory=make_figure_1_6,
        ),
        CatalogEntry(
            name="figure-1.11",
            description="starts and ends with the same symbol (alphabet a,b)",
            factory=make_figure_1_11,
        ),
    )
}
