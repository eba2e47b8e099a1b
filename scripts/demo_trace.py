from __future__ import annotations

from dfa_sim.engine import is_accepted
from dfa_sim.event_sink import InMemoryEventSink
from dfa_sim.textbook import make_figure_1_6, make_figure_1_11


def main() -> None:
    runs = [
        (make_figure_1_6(), [[1, 0, 0], [0, 0, 0, 1, 0, 0, 0, 0], [1, 0, 0, 0], []]),
        (make_figure_1_11(), [["a"], ["b", "a", "b"], ["a", "b"], []]),
    ]

    sink = InMemoryEventSink()
    for automaton, words in runs:
        for word in words:
            print(f"\nInput {word!r}")
            trace = is_accepted(automaton, word, event_sink=sink)
            trace.print_and_accept()

    print(f"\n{sink.current_run} runs, {len(sink.events)} events")


if __name__ == "__main__":
    main()
