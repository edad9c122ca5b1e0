from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..codec import (
    byte_at,
    normalize_frame,
    read_delimited_options,
    read_terminated_string,
    read_uint_be,
)
from ..defs import (
    DEVICE_INFO_COUNT_AFTER_NAME,
    DEVICE_INFO_NAME,
    DEVICE_INFO_ORIGIN,
    ELRS_SERIAL_MAGIC,
    FIELD_HIDDEN_BIT,
    FIELD_TYPE_MASK,
    PARAM_ENTRY_CHUNKS_REMAINING,
    PARAM_ENTRY_DATA,
    PARAM_ENTRY_FIELD_ID,
    PARAM_ENTRY_ORIGIN,
    SELECT_UNIT_AFTER_OPTIONS,
    FieldType,
)

#: Raw value reported when the selected index falls outside the option list
OPTION_SENTINEL = "?"


# ---------------------------
# Device info
# ---------------------------
@dataclass(frozen=True)
class DeviceInfo:
    """
    Decoded DEVICE_INFO (0x29) payload.

    fields_count is None when the frame is too short to carry it.
    """
    origin: Optional[int]
    name: str
    serial: int
    fields_count: Optional[int]

    @property
    def is_elrs(self) -> bool:
        return self.serial == ELRS_SERIAL_MAGIC

    @classmethod
    def from_payload(cls, data: Any) -> "DeviceInfo":
        frame = normalize_frame(data)
        origin = frame[DEVICE_INFO_ORIGIN] if len(frame) > DEVICE_INFO_ORIGIN else None

        name, offset = read_terminated_string(frame, DEVICE_INFO_NAME)
        count_idx = offset + DEVICE_INFO_COUNT_AFTER_NAME
        fields_count = frame[count_idx] if count_idx < len(frame) else None

        return cls(
            origin=origin,
            name=name,
            serial=read_uint_be(frame, offset, 4),
            fields_count=fields_count,
        )


# ---------------------------
# Parameter entry chunks
# ---------------------------
@dataclass(frozen=True)
class ParameterChunk:
    """One PARAMETER_ENTRY (0x2B) frame: addressing header plus a slice of field data."""
    origin: Optional[int]
    field_id: Optional[int]
    chunks_remaining: int
    data: bytes

    @classmethod
    def from_payload(cls, data: Any) -> "ParameterChunk":
        frame = normalize_frame(data)
        origin = frame[PARAM_ENTRY_ORIGIN] if len(frame) > PARAM_ENTRY_ORIGIN else None
        field_id = frame[PARAM_ENTRY_FIELD_ID] if len(frame) > PARAM_ENTRY_FIELD_ID else None
        return cls(
            origin=origin,
            field_id=field_id,
            chunks_remaining=byte_at(frame, PARAM_ENTRY_CHUNKS_REMAINING),
            data=frame[PARAM_ENTRY_DATA:],
        )


@dataclass(frozen=True)
class ParameterEntry:
    """
    A fully reassembled parameter table entry.

    Only TEXT_SELECTION entries carry options/value_index/unit; other types
    are decoded down to their header (parent, type, name).
    """
    field_id: int
    parent: int
    field_type: int
    hidden: bool
    name: str
    options: Tuple[str, ...] = ()
    value_index: Optional[int] = None
    unit: str = ""

    @property
    def is_selection(self) -> bool:
        return self.field_type == FieldType.TEXT_SELECTION

    @property
    def type_name(self) -> str:
        try:
            return FieldType(self.field_type).name
        except ValueError:
            return f"TYPE_{self.field_type}"

    @property
    def selected_option(self) -> str:
        idx = self.value_index
        if idx is None or not (0 <= idx < len(self.options)):
            return OPTION_SENTINEL
        return self.options[idx]

    @classmethod
    def decode(cls, field_id: int, data: Any) -> Optional["ParameterEntry"]:
        """
        Decode field data ([parent][type][name\\0]...).

        Returns None when the buffer is too short to hold a type byte.
        """
        buf = normalize_frame(data)
        if len(buf) < 2:
            return None

        parent = buf[0]
        type_byte = buf[1]
        field_type = type_byte & FIELD_TYPE_MASK
        name, offset = read_terminated_string(buf, 2)

        if field_type != FieldType.TEXT_SELECTION:
            return cls(
                field_id=int(field_id),
                parent=parent,
                field_type=field_type,
                hidden=bool(type_byte & FIELD_HIDDEN_BIT),
                name=name,
            )

        options, offset = read_delimited_options(buf, offset)
        value_index = byte_at(buf, offset)
        unit, _ = read_terminated_string(buf, offset + SELECT_UNIT_AFTER_OPTIONS)

        return cls(
            field_id=int(field_id),
            parent=parent,
            field_type=field_type,
            hidden=bool(type_byte & FIELD_HIDDEN_BIT),
            name=name,
            options=tuple(options),
            value_index=value_index,
            unit=unit,
        )
