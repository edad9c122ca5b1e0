# elrsband/model/labels.py
from __future__ import annotations

import re
from typing import Optional

UNKNOWN_LABEL = "Unknown"

_WS_RE = re.compile(r"\s+")
_SLASH_RE = re.compile(r"\s+/\s+")
_DIGIT_HZ_RE = re.compile(r"([0-9])Hz")
_PKT_RE = re.compile(r"[Pp][Kk][Tt]")
_PACKET_RE = re.compile(r"[Pp]acket")
_TELEMETRY_RE = re.compile(r"[Tt]elemetry")
_RATIO_RE = re.compile(r"[Rr]atio")


def format_packet_label(raw: Optional[str]) -> str:
    """Display label for a packet-rate option, e.g. '333Hz Full' -> '333 Hz Full'."""
    if not raw:
        return UNKNOWN_LABEL
    label = _DIGIT_HZ_RE.sub(r"\1 Hz", raw)
    label = _WS_RE.sub(" ", label)
    label = _SLASH_RE.sub("/", label)
    label = _PKT_RE.sub("Pkt", label)
    label = _PACKET_RE.sub("Packet", label)
    return label.strip()


def format_telemetry_label(raw: Optional[str]) -> str:
    if not raw:
        return UNKNOWN_LABEL
    label = _WS_RE.sub(" ", raw).strip()
    label = _TELEMETRY_RE.sub("Telem", label)
    return _RATIO_RE.sub("Ratio", label)
