from __future__ import annotations

from typing import Any, Iterable

from dfa_sim.events import Event, EventType
from dfa_sim.trace import RunTrace


def format_path(trace: RunTrace) -> str:
    """Render the path as a list of (state, label) pairs."""
    return repr([(entry.state, entry.label) for entry in trace.path])


def render_trace(trace: RunTrace) -> str:
    """
    Render a run trace as three lines:

      accept on | reject on
      [(state, label), ...]
      with final states of [...]
    """
    out = [
        "accept on" if trace.accepted else "reject on",
        format_path(trace),
        f"with final states of {list(trace.accepting_states)!r}",
    ]
    return "\n".join(out) + "\n"


def derive_visited_states(events: Iterable[Event]) -> list[Any]:
    """
    Derive the sequence of visited states from an ordered event stream
    of a single run.

    Rule:
      - RUN_START contributes the start state
      - Each TRANSITION contributes its target state
      - UNDEFINED_TRANSITION and RUN_END contribute nothing
    """
    visited: list[Any] = []
    for e in events:
        if e.type == EventType.RUN_START:
            visited = [e.state]
        elif e.type == EventType.TRANSITION:
            visited.append(e.state)
    return visited


def event_to_dict(e: Event) -> dict[str, Any]:
    """Return a JSON-friendly dict; states and symbols are rendered with repr()."""
    return {
        "run": e.run,
        "seq": e.seq,
        "type": str(e.type.value),
        "state": repr(e.state),
        "symbol": None if e.symbol is None else repr(e.symbol),
        "data": {k: (v if isinstance(v, (bool, int, float)) else repr(v)) for k, v in e.data.items()},
    }
