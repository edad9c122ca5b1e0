# elrsband/runtime/session.py
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from elrsband.interfaces.link import TelemetryLink
from elrsband.model.field import DEFAULT_SLOTS, FieldDescriptor, ParameterSlot
from elrsband.protocol._internal.pending_request import PendingRequest
from elrsband.protocol.core.defs import (
    HANDSET_ELRS,
    HANDSET_FALLBACK,
    RESP_DEVICE_INFO,
    RESP_PARAM_ENTRY,
)
from elrsband.protocol.core.frames import CommandFrame, DeviceInfo, ParameterChunk, ParameterEntry

from .state import SessionState

DEFAULT_MODULE_NAME = "ExpressLRS"


class ProtocolSession:
    """
    Inbound frame handlers and outbound request helpers.

    Every operation takes the SessionState explicitly; the session itself only
    holds the link, the slot definitions and a logger. Handlers never raise on
    malformed input: frames for other devices, unexpected field ids and
    truncated buffers are ignored.
    """

    def __init__(
        self,
        link: Optional[TelemetryLink],
        slots: Sequence[ParameterSlot] = DEFAULT_SLOTS,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self.link = link
        self.slots = tuple(slots)
        self._log = logger or logging.getLogger(__name__)

    # ---------------- Outbound ----------------
    def _push(self, state: SessionState, frame: CommandFrame) -> bool:
        if not state.transport_available or self.link is None:
            return False
        self._log.debug(
            "PUSH type=%s payload=%s",
            frame.type_name,
            frame.payload.hex(),
        )
        return bool(self.link.push(frame.frame_type, frame.payload))

    def request_device_info(self, state: SessionState) -> bool:
        return self._push(state, CommandFrame.device_info_request())

    def request_field(self, state: SessionState, field_id: int, now: int, chunk: int = 0) -> None:
        """Start a new parameter read; replaces any pending request."""
        if not state.transport_available:
            return
        state.pending = PendingRequest(field_id=int(field_id), started_at=now, chunk_index=int(chunk))
        self._push_chunk_request(state, state.pending)

    def _push_chunk_request(self, state: SessionState, pending: PendingRequest) -> None:
        self._log.debug("PARAM_CHUNK_REQUEST field=%d chunk=%d", pending.field_id, pending.chunk_index)
        self._push(
            state,
            CommandFrame.param_chunk_request(
                state.device_id,
                state.handset_address,
                pending.field_id,
                pending.chunk_index,
            ),
        )

    # ---------------- Inbound ----------------
    def handle_frame(self, state: SessionState, command: int, payload: Any, now: int) -> None:
        if command == RESP_DEVICE_INFO:
            self.handle_device_info(state, payload)
        elif command == RESP_PARAM_ENTRY:
            self.handle_parameter_entry(state, payload, now)

    def handle_device_info(self, state: SessionState, payload: Any) -> None:
        info = DeviceInfo.from_payload(payload)
        if info.origin is None or info.origin != state.device_id:
            return

        state.device_name = info.name or DEFAULT_MODULE_NAME

        if info.fields_count is not None and info.fields_count != state.fields_count:
            self._log.info(
                "DISCOVERY_RESET name=%s fields=%d previous=%s",
                state.device_name,
                info.fields_count,
                state.fields_count,
            )
            state.fields_count = info.fields_count
            state.reset_discovery()

        state.handset_address = HANDSET_ELRS if info.is_elrs else HANDSET_FALLBACK
        self._log.debug(
            "DEVICE_INFO name=%s fields=%s handset=0x%02X",
            state.device_name,
            info.fields_count,
            state.handset_address,
        )

    def handle_parameter_entry(self, state: SessionState, payload: Any, now: int) -> None:
        chunk = ParameterChunk.from_payload(payload)
        pending = state.pending
        if chunk.origin != state.device_id or pending is None or chunk.field_id != pending.field_id:
            return

        if chunk.chunks_remaining > 0 or pending.mid_sequence:
            pending.append(chunk.data)
            if chunk.chunks_remaining > 0:
                pending.advance(now)
                self._push_chunk_request(state, pending)
                return
            data = bytes(pending.buffer)
        else:
            data = chunk.data

        state.pending = None
        entry = ParameterEntry.decode(pending.field_id, data)
        if entry is None:
            self._log.debug("PARAM_ENTRY_TRUNCATED field=%d len=%d", pending.field_id, len(data))
            return
        self.apply_entry(state, entry, now)

    # ---------------- Field binding ----------------
    def apply_entry(self, state: SessionState, entry: ParameterEntry, now: int) -> None:
        """
        Bind and/or refresh slots from a reassembled entry.

        Only text-selection entries can be bound. A slot binds the first field
        whose strings satisfy its classifier and keeps that field id until the
        next discovery reset.
        """
        if not entry.is_selection:
            self._log.debug(
                "PARAM_ENTRY_SKIPPED field=%d type=%s name=%s",
                entry.field_id,
                entry.type_name,
                entry.name,
            )
            return

        for slot in self.slots:
            matches = slot.classifier(entry.name, entry.options)
            current = state.fields.get(slot.key)

            if current is None and matches:
                current = FieldDescriptor(
                    field_id=entry.field_id,
                    name=entry.name,
                    options=list(entry.options),
                    unit=entry.unit,
                )
                state.fields[slot.key] = current
                self._log.info(
                    "FIELD_BOUND slot=%s field=%d name=%s",
                    slot.key,
                    entry.field_id,
                    entry.name,
                )

            if current is not None and current.field_id == entry.field_id and matches:
                raw = entry.selected_option
                current.options = list(entry.options)
                current.unit = entry.unit
                current.selected_index = entry.value_index
                current.raw_value = raw
                current.label = slot.formatter(raw)
                current.last_update = now
                self._log.debug(
                    "FIELD_VALUE slot=%s field=%d raw=%s label=%s",
                    slot.key,
                    entry.field_id,
                    raw,
                    current.label,
                )
