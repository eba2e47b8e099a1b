from __future__ import annotations

import pytest

from dfa_sim.engine import is_accepted
from dfa_sim.event_sink import InMemoryEventSink
from dfa_sim.events import EventType
from dfa_sim.models import Automaton
from dfa_sim.reporting import derive_visited_states
from dfa_sim.textbook import make_figure_1_6


def test_event_order_on_accepting_run():
    """
    Asserts causality ordering (not formatting/visuals):
      RUN_START -> TRANSITION per symbol -> RUN_END
    """
    sink = InMemoryEventSink()
    is_accepted(make_figure_1_6(), [1, 0, 0], event_sink=sink)

    assert [e.type for e in sink.events] == [
        EventType.RUN_START,
        EventType.TRANSITION,
        EventType.TRANSITION,
        EventType.TRANSITION,
        EventType.RUN_END,
    ]
    assert [e.seq for e in sink.events] == [1, 2, 3, 4, 5]
    assert all(e.run == 1 for e in sink.events)

    first = sink.events[1]
    assert first.state == 2
    assert first.symbol == 1
    assert first.data["source"] == 1
    assert first.data["position"] == 0

    end = sink.events[-1]
    assert end.state == 2
    assert end.data == {"accepted": True, "consumed": 3}


def test_event_order_on_early_rejection():
    dfa = Automaton.from_table(
        states=("s", "t"),
        alphabet=("a", "b"),
        table={("s", "a"): "t"},
        start_state="s",
        accepting_states=("t",),
    )
    sink = InMemoryEventSink()
    is_accepted(dfa, ["a", "b", "a"], event_sink=sink)

    assert [e.type for e in sink.events] == [
        EventType.RUN_START,
        EventType.TRANSITION,
        EventType.UNDEFINED_TRANSITION,
        EventType.RUN_END,
    ]
    undefined = sink.events[2]
    assert undefined.state == "t"
    assert undefined.symbol == "b"
    assert undefined.data["position"] == 1
    assert sink.events[-1].data == {"accepted": False, "consumed": 1}


def test_sink_numbers_runs_and_resets_seq():
    sink = InMemoryEventSink()
    dfa = make_figure_1_6()
    is_accepted(dfa, [1], event_sink=sink)
    is_accepted(dfa, [], event_sink=sink)

    assert sink.current_run == 2
    second = sink.events_for_run(2)
    assert [e.seq for e in second] == [1, 2]
    assert [e.type for e in second] == [EventType.RUN_START, EventType.RUN_END]


def test_emit_before_start_run_is_an_error():
    sink = InMemoryEventSink()
    with pytest.raises(RuntimeError, match="start_run"):
        sink.emit(EventType.RUN_START)


def test_visited_states_from_events_match_trace():
    sink = InMemoryEventSink()
    trace = is_accepted(make_figure_1_6(), [0, 1, 0, 0, 1], event_sink=sink)
    # The trace records the start state twice.
    assert derive_visited_states(sink.events) == trace.states()[1:]
