# elrsband/model/classifier.py
from __future__ import annotations

import re
from typing import Iterable, Optional, Protocol

_RATIO_RE = re.compile(r"\d+:\d+")

PACKET_RATE_NAMES = ("packet rate", "pkt rate")
PACKET_RATE_OPTION_HINTS = ("hz", "pkt", "packet")

TELEMETRY_RATIO_NAMES = ("telemetry ratio", "telem ratio", "telem")
TELEMETRY_RATIO_OPTION_HINTS = ("tele", "ratio", "std", "no tele")


class FieldClassifier(Protocol):
    """Decides from a field's declared strings whether it is the parameter a slot tracks."""
    def __call__(self, name: Optional[str], options: Iterable[Optional[str]]) -> bool: ...


def _name_contains(name: Optional[str], needles: Iterable[str]) -> bool:
    lname = (name or "").lower()
    return any(n in lname for n in needles)


def _lowered(options: Iterable[Optional[str]]) -> Iterable[str]:
    for opt in options or ():
        if opt:
            yield opt.lower()


def looks_like_packet_rate(name: Optional[str], options: Iterable[Optional[str]]) -> bool:
    if _name_contains(name, PACKET_RATE_NAMES):
        return True
    return any(
        hint in opt
        for opt in _lowered(options)
        for hint in PACKET_RATE_OPTION_HINTS
    )


def looks_like_telemetry_ratio(name: Optional[str], options: Iterable[Optional[str]]) -> bool:
    if _name_contains(name, TELEMETRY_RATIO_NAMES):
        return True
    for opt in _lowered(options):
        if any(hint in opt for hint in TELEMETRY_RATIO_OPTION_HINTS):
            return True
        if _RATIO_RE.search(opt):
            return True
    return False
