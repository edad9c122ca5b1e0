# elrsband/app/render.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from elrsband.runtime.state import PacketInfo, PacketState

STATUS_MESSAGES = {
    PacketState.NO_CRSF: "CRSF unavailable",
    PacketState.WAITING: "Waiting for ELRS...",
    PacketState.SCANNING: "Scanning for packet rate...",
    PacketState.NO_DATA: "Packet data missing",
}

FALLBACK_LABEL = "Rate ?"
SUBLINE_SEP = " | "


@dataclass(frozen=True)
class StatusText:
    """Rendered status: a main line, an optional subline and a stale flag."""
    main: str
    subline: Optional[str] = None
    stale: bool = False

    def as_line(self) -> str:
        main = f"{self.main} (stale)" if self.stale else self.main
        if self.subline:
            return f"{main}{SUBLINE_SEP}{self.subline}"
        return main


def render_status(info: PacketInfo, *, show_name: bool = True, show_telem: bool = True) -> StatusText:
    if not info.has_value:
        main = STATUS_MESSAGES.get(info.state, "Unknown")
        sub = info.module if show_name and info.module else None
        return StatusText(main=main, subline=sub)

    parts: list[str] = []
    if show_name:
        if info.module:
            parts.append(info.module)
        if info.raw and info.raw != info.label:
            parts.append(info.raw)

    if show_telem and info.tele_label:
        tele = info.tele_label
        if info.tele_raw and info.tele_raw != info.tele_label:
            tele += f" ({info.tele_raw})"
        if info.tele_stale:
            tele += " *"
        parts.append(f"Telem {tele}")

    return StatusText(
        main=info.label or FALLBACK_LABEL,
        subline=SUBLINE_SEP.join(parts) if parts else None,
        stale=info.state == PacketState.STALE,
    )
