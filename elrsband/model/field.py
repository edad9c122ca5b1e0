# elrsband/model/field.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .classifier import FieldClassifier, looks_like_packet_rate, looks_like_telemetry_ratio
from .labels import format_packet_label, format_telemetry_label


@dataclass
class FieldDescriptor:
    """
    A discovered parameter-table entry bound to a slot.

    raw_value/label stay None until the first value read after binding.
    """
    field_id: int
    name: str
    options: List[str] = field(default_factory=list)
    unit: str = ""
    selected_index: Optional[int] = None
    raw_value: Optional[str] = None
    label: Optional[str] = None
    last_update: int = 0

    @property
    def has_value(self) -> bool:
        return self.label is not None


@dataclass(frozen=True)
class ParameterSlot:
    """
    Static description of a parameter the monitor hunts for.

    key: stable slot identifier ("target", "telemetry")
    title: fallback display name when the device name is unknown
    classifier: predicate over (field name, options)
    formatter: raw option text -> display label
    """
    key: str
    title: str
    classifier: FieldClassifier
    formatter: Callable[[Optional[str]], str]


PACKET_RATE = ParameterSlot(
    key="target",
    title="Packet Rate",
    classifier=looks_like_packet_rate,
    formatter=format_packet_label,
)

TELEMETRY_RATIO = ParameterSlot(
    key="telemetry",
    title="Telem Ratio",
    classifier=looks_like_telemetry_ratio,
    formatter=format_telemetry_label,
)

#: Slot order doubles as refresh priority; the first slot drives status.
DEFAULT_SLOTS: Tuple[ParameterSlot, ...] = (PACKET_RATE, TELEMETRY_RATIO)
