# elrsband/protocol/engine.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from elrsband.interfaces.link import TelemetryLink, TickClock
from elrsband.model.field import DEFAULT_SLOTS, ParameterSlot
from elrsband.runtime.scheduler import RequestScheduler
from elrsband.runtime.session import ProtocolSession
from elrsband.runtime.state import PacketInfo, SessionState
from elrsband.runtime.timings import PollTimings

from .core.defs import DEVICE_ID


class MonitorEngine:
    """
    Tick-driven packet-rate monitor.

    Call tick() from the host loop: inbound frames are always drained, while
    the scheduler only runs when allow_requests is True. Without a link the
    engine stays in the NO_CRSF state and never touches the clock-driven
    timers.
    """

    def __init__(
        self,
        link: Optional[TelemetryLink],
        clock: TickClock,
        *,
        timings: Optional[PollTimings] = None,
        device_id: int = DEVICE_ID,
        slots: Sequence[ParameterSlot] = DEFAULT_SLOTS,
        logger: Optional[logging.Logger] = None,
    ):
        self.link = link
        self.clock = clock
        self._log = logger or logging.getLogger(__name__)

        self.state = SessionState.create(
            slots,
            transport_available=link is not None,
            device_id=device_id,
        )
        self._session = ProtocolSession(link, slots, logger=self._log)
        self._scheduler = RequestScheduler(self._session, timings, logger=self._log)

    @property
    def timings(self) -> PollTimings:
        return self._scheduler.timings

    def ensure_init(self) -> None:
        self._scheduler.initialize(self.state, self.clock.now())

    # ---------------- Inbound ----------------
    def process_inbound(self, now: Optional[int] = None) -> int:
        """Pop and handle every available inbound frame; returns the count handled."""
        if not self.state.transport_available or self.link is None:
            return 0

        now = self.clock.now() if now is None else now
        handled = 0
        while True:
            item = self.link.pop()
            if item is None:
                break
            command, payload = item
            self._session.handle_frame(self.state, command, payload, now)
            handled += 1
        return handled

    # ---------------- Outbound ----------------
    def schedule(self, now: Optional[int] = None) -> Optional[str]:
        now = self.clock.now() if now is None else now
        return self._scheduler.schedule(self.state, now)

    def tick(self, allow_requests: bool = True) -> Optional[str]:
        now = self.clock.now()
        self._scheduler.initialize(self.state, now)
        self.process_inbound(now)
        if allow_requests:
            return self.schedule(now)
        return None

    # ---------------- Status ----------------
    def status(self) -> PacketInfo:
        return self._scheduler.status(self.state, self.clock.now())

    # ---------------- Factory ----------------
    @classmethod
    def create(
        cls,
        link: Optional[TelemetryLink],
        clock: TickClock,
        *,
        timings: Optional[PollTimings] = None,
        device_id: int = DEVICE_ID,
        slots: Sequence[ParameterSlot] = DEFAULT_SLOTS,
        logger: Optional[logging.Logger] = None,
    ) -> "MonitorEngine":
        engine = cls(link, clock, timings=timings, device_id=device_id, slots=slots, logger=logger)
        engine.ensure_init()
        return engine
