# elrsband/interfaces/link.py
from __future__ import annotations

from typing import Optional, Protocol, Tuple

#: (frame type, payload) as exchanged with the telemetry link
RawFrame = Tuple[int, bytes]


class TelemetryLink(Protocol):
    """
    Frame-level push/pop primitives for the CRSF telemetry link.

    push() returns False when the frame could not be queued.
    pop() returns None once no more inbound frames are available.
    """
    def push(self, command: int, payload: bytes) -> bool: ...
    def pop(self) -> Optional[RawFrame]: ...


class TickClock(Protocol):
    """Monotonic tick source; the monitor's timing constants are in these ticks."""
    def now(self) -> int: ...
