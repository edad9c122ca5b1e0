# elrsband/runtime/timings.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PollTimings:
    """
    Scheduler cadence, in clock ticks (10 ms each with the default clock).

    request_timeout: drop an unanswered chunk request after this age
    scan_spacing: gap between successive table-scan requests
    rescan_delay: wait before restarting a scan that reached the table end
    refresh_interval: gap between value refreshes of a bound field
    stale_after: age after which a value is reported stale
    device_poll_interval: gap between device-info requests
    """
    request_timeout: int = 200
    scan_spacing: int = 15
    rescan_delay: int = 500
    refresh_interval: int = 120
    stale_after: int = 350
    device_poll_interval: int = 120

    def __post_init__(self) -> None:
        for name in (
            "request_timeout",
            "scan_spacing",
            "rescan_delay",
            "refresh_interval",
            "stale_after",
            "device_poll_interval",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
