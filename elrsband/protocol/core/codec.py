# elrsband/protocol/core/codec.py
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

# Glyph bytes ELRS uses for up/down arrows in option names
ARROW_UP_BYTE = 0xC0
ARROW_DOWN_BYTE = 0xC1
OPTION_SEPARATOR = 0x3B  # ';'

ByteSource = Sequence[int]


def byte_to_display_char(byte: int) -> str:
    if byte == ARROW_UP_BYTE:
        return "^"
    if byte == ARROW_DOWN_BYTE:
        return "v"
    if byte < 32 or byte > 126:
        return "?"
    return chr(byte)


def byte_at(data: ByteSource, index: int) -> int:
    """Return data[index], or 0 when the index is past the end of the buffer."""
    if 0 <= index < len(data):
        return data[index]
    return 0


def read_terminated_string(data: ByteSource, offset: int) -> Tuple[str, int]:
    """
    Read a NUL-terminated string starting at offset.

    Returns (text, next_offset). next_offset points just past the terminator,
    or past the last consumed byte when the buffer ends without one.
    """
    chars: List[str] = []
    pos = offset
    end = len(data)
    while pos < end and data[pos] != 0:
        chars.append(byte_to_display_char(data[pos]))
        pos += 1
    if pos < end:
        pos += 1  # skip NUL
    return "".join(chars), pos


def read_delimited_options(data: ByteSource, offset: int) -> Tuple[List[str], int]:
    """
    Read a ';'-separated option list terminated by NUL.

    Always yields at least one (possibly empty) option.
    """
    options: List[str] = []
    chars: List[str] = []
    pos = offset
    end = len(data)
    while pos < end:
        byte = data[pos]
        pos += 1
        if byte == 0:
            break
        if byte == OPTION_SEPARATOR:
            options.append("".join(chars))
            chars = []
        else:
            chars.append(byte_to_display_char(byte))
    options.append("".join(chars))
    return options, pos


def read_uint_be(data: ByteSource, offset: int, size: int) -> int:
    value = 0
    for i in range(size):
        value = (value << 8) | byte_at(data, offset + i)
    return value


def normalize_frame(data: Any) -> bytes:
    """
    Coerce a frame payload into bytes.

    Accepts bytes-like objects, sequences of ints (0..255) and latin-1 packed
    strings. Anything else yields an empty payload.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("latin-1", errors="replace")
    if isinstance(data, (list, tuple)):
        try:
            return bytes(int(b) & 0xFF for b in data)
        except (TypeError, ValueError):
            return b""
    return b""
