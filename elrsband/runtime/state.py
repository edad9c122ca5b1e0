# elrsband/runtime/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional

from elrsband.model.field import FieldDescriptor, ParameterSlot
from elrsband.protocol._internal.pending_request import PendingRequest
from elrsband.protocol.core.defs import DEVICE_ID, HANDSET_ELRS


@dataclass
class SessionTimers:
    """Next-allowed ticks for each kind of outbound request."""
    next_device_poll: int = 0
    next_field_request: int = 0
    next_rescan: int = 0
    next_refresh: Dict[str, int] = field(default_factory=dict)


@dataclass
class SessionState:
    """
    Mutable discovery/polling state for one device link.

    fields maps slot key -> bound descriptor (None while unresolved).
    """
    transport_available: bool
    device_id: int = DEVICE_ID
    handset_address: int = HANDSET_ELRS
    device_name: Optional[str] = None
    fields_count: Optional[int] = None
    scan_cursor: int = 1
    fields: Dict[str, Optional[FieldDescriptor]] = field(default_factory=dict)
    pending: Optional[PendingRequest] = None
    timers: SessionTimers = field(default_factory=SessionTimers)
    initialized: bool = False

    @classmethod
    def create(
        cls,
        slots: Iterable[ParameterSlot],
        *,
        transport_available: bool,
        device_id: int = DEVICE_ID,
    ) -> "SessionState":
        state = cls(transport_available=transport_available, device_id=int(device_id))
        keys = [s.key for s in slots]
        state.fields = {k: None for k in keys}
        state.timers.next_refresh = {k: 0 for k in keys}
        return state

    @property
    def table_known(self) -> bool:
        # a zero count is treated the same as no count
        return bool(self.fields_count)

    @property
    def needs_scan(self) -> bool:
        return any(fd is None for fd in self.fields.values())

    def field(self, key: str) -> Optional[FieldDescriptor]:
        return self.fields.get(key)

    def reset_discovery(self) -> None:
        """Forget every binding and restart the table scan from index 1."""
        self.scan_cursor = 1
        for key in self.fields:
            self.fields[key] = None
            self.timers.next_refresh[key] = 0


class PacketState(str, Enum):
    NO_CRSF = "no_crsf"
    WAITING = "waiting"
    SCANNING = "scanning"
    NO_DATA = "no_data"
    READY = "ready"
    STALE = "stale"


@dataclass(frozen=True)
class PacketInfo:
    """
    Status snapshot handed to presentation code.

    label/raw/field_name/stale are only meaningful for READY and STALE.
    tele_* are None unless the telemetry ratio is bound and has a value.
    """
    state: PacketState
    module: Optional[str] = None
    label: Optional[str] = None
    raw: Optional[str] = None
    field_name: Optional[str] = None
    stale: bool = False
    tele_label: Optional[str] = None
    tele_raw: Optional[str] = None
    tele_field_name: Optional[str] = None
    tele_stale: Optional[bool] = None

    @property
    def has_value(self) -> bool:
        return self.state in (PacketState.READY, PacketState.STALE)

    def as_dict(self) -> dict:
        return {
            "state": self.state.value,
            "module": self.module,
            "label": self.label,
            "raw": self.raw,
            "field_name": self.field_name,
            "stale": self.stale,
            "tele_label": self.tele_label,
            "tele_raw": self.tele_raw,
            "tele_field_name": self.tele_field_name,
            "tele_stale": self.tele_stale,
        }
