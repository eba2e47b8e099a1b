from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from dfa_sim.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured run events.
    The engine must be able to run with event_sink=None (no events).
    """

    @abstractmethod
    def start_run(self) -> int: ...

    @abstractmethod
    def emit(
        self,
        event_type: EventType,
        state: Any = None,
        symbol: Any = None,
        **data: Any,
    ) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for tests/demos.
    Owns run/seq numbering so the engine stays free of global state.
    """

    events: list[Event] = field(default_factory=list)
    _run: int = field(default=0, init=False)
    _seq: int = field(default=0, init=False)

    @property
    def current_run(self) -> int:
        return self._run

    def start_run(self) -> int:
        self._run += 1
        self._seq = 0
        return self._run

    def emit(
        self,
        event_type: EventType,
        state: Any = None,
        symbol: Any = None,
        **data: Any,
    ) -> None:
        if self._run <= 0:
            raise RuntimeError("EventSink.start_run() must be called before emitting events.")
        self._seq += 1
        self.events.append(
            Event(
                run=self._run,
                seq=self._seq,
                type=event_type,
                state=state,
                symbol=symbol,
                data=dict(data),
            )
        )

    def events_for_run(self, run: int) -> list[Event]:
        return [e for e in self.events if e.run == run]
