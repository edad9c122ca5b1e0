# elrsband/runtime/scheduler.py
from __future__ import annotations

import logging
from typing import Optional

from .session import ProtocolSession
from .state import PacketInfo, PacketState, SessionState
from .timings import PollTimings

ACTION_DEVICE_INFO = "device_info"
ACTION_REFRESH = "refresh"
ACTION_SCAN = "scan"


class RequestScheduler:
    """
    Chooses at most one outbound request per tick.

    Priority: expire a stale pending request, poll device info until the
    table size is known, wait for the outstanding response, refresh the most
    overdue bound field, then advance (or restart) the table scan.
    """

    def __init__(
        self,
        session: ProtocolSession,
        timings: Optional[PollTimings] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self.timings = timings or PollTimings()
        self._log = logger or logging.getLogger(__name__)

    def initialize(self, state: SessionState, now: int) -> None:
        if state.initialized:
            return
        state.initialized = True
        if not state.transport_available:
            return
        state.timers.next_device_poll = now
        state.timers.next_rescan = now + self.timings.rescan_delay

    def schedule(self, state: SessionState, now: int) -> Optional[str]:
        """Run one scheduling decision; returns the action taken, if any."""
        if not state.transport_available:
            return None

        t = self.timings
        timers = state.timers

        pending = state.pending
        if pending is not None and pending.expired(now, t.request_timeout):
            self._log.debug(
                "PENDING_TIMEOUT field=%d chunk=%d age=%d",
                pending.field_id,
                pending.chunk_index,
                pending.age(now),
            )
            state.pending = None

        if not state.table_known:
            if now >= timers.next_device_poll:
                self.session.request_device_info(state)
                timers.next_device_poll = now + t.device_poll_interval
                return ACTION_DEVICE_INFO
            return None

        if state.pending is not None:
            return None

        due_key = self._most_due_slot(state, now)
        if due_key is not None:
            fd = state.fields[due_key]
            self.session.request_field(state, fd.field_id, now)
            timers.next_refresh[due_key] = now + t.refresh_interval
            return f"{ACTION_REFRESH}:{due_key}"

        if not state.needs_scan:
            return None

        if state.scan_cursor > state.fields_count:
            if now < timers.next_rescan:
                return None
            self._log.debug("RESCAN fields=%d", state.fields_count)
            state.scan_cursor = 1
            timers.next_rescan = now + t.rescan_delay

        if now >= timers.next_field_request and state.scan_cursor <= state.fields_count:
            self.session.request_field(state, state.scan_cursor, now)
            state.scan_cursor += 1
            timers.next_field_request = now + t.scan_spacing
            return ACTION_SCAN

        return None

    def _most_due_slot(self, state: SessionState, now: int) -> Optional[str]:
        # earliest timer wins; ties go to slot order
        best_key: Optional[str] = None
        best_at = 0
        for slot in self.session.slots:
            if state.fields.get(slot.key) is None:
                continue
            at = state.timers.next_refresh.get(slot.key, 0)
            if now < at:
                continue
            if best_key is None or at < best_at:
                best_key, best_at = slot.key, at
        return best_key

    # ---------------- Status ----------------
    def status(self, state: SessionState, now: int) -> PacketInfo:
        if not state.transport_available:
            return PacketInfo(state=PacketState.NO_CRSF)
        if not state.table_known:
            return PacketInfo(state=PacketState.WAITING, module=state.device_name)

        primary, *others = self.session.slots
        target = state.fields.get(primary.key)
        if target is None:
            return PacketInfo(state=PacketState.SCANNING, module=state.device_name)
        if not target.has_value:
            return PacketInfo(state=PacketState.NO_DATA, module=state.device_name)

        stale = (now - target.last_update) > self.timings.stale_after

        tele_label = tele_raw = tele_name = None
        tele_stale: Optional[bool] = None
        if others:
            tele = state.fields.get(others[0].key)
            if tele is not None:
                tele_name = tele.name
                tele_raw = tele.raw_value
                tele_label = tele.label
                if tele.has_value:
                    tele_stale = (now - tele.last_update) > self.timings.stale_after

        return PacketInfo(
            state=PacketState.STALE if stale else PacketState.READY,
            module=state.device_name,
            label=target.label,
            raw=target.raw_value,
            field_name=target.name or primary.title,
            stale=stale,
            tele_label=tele_label,
            tele_raw=tele_raw,
            tele_field_name=tele_name,
            tele_stale=tele_stale,
        )
