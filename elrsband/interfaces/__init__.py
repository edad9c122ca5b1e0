from .link import RawFrame, TelemetryLink, TickClock

__all__ = ["RawFrame", "TelemetryLink", "TickClock"]
