from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Minimal event vocabulary for one simulation run.
    Keep this small; add types only when tests require them.
    """

    RUN_START = "RUN_START"
    TRANSITION = "TRANSITION"
    UNDEFINED_TRANSITION = "UNDEFINED_TRANSITION"
    RUN_END = "RUN_END"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the engine (optionally).

    run and seq are owned by the sink (so the engine remains stateless).
    """

    run: int
    seq: int
    type: EventType
    state: Any = None
    symbol: Any = None
    data: dict[str, Any] = field(default_factory=dict)
