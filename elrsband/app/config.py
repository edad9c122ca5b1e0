# elrsband/app/config.py
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional

from elrsband.common.clock import DEFAULT_TICK_S
from elrsband.core.errors import ConfigError
from elrsband.protocol.core.defs import DEVICE_ID
from elrsband.runtime.timings import PollTimings
from elrsband.transport.uart import DEFAULT_BAUDRATE


@dataclass(frozen=True)
class LinkConfig:
    port: Optional[str] = None
    baudrate: int = DEFAULT_BAUDRATE
    tick_s: float = DEFAULT_TICK_S
    tick_interval_s: float = 0.02


@dataclass(frozen=True)
class MonitorConfig:
    device_id: int = DEVICE_ID
    timings: PollTimings = field(default_factory=PollTimings)
    show_name: bool = True
    show_telem: bool = True
    link: LinkConfig = field(default_factory=LinkConfig)

    def with_overrides(self, *, port: Optional[str] = None, baudrate: Optional[int] = None) -> "MonitorConfig":
        """Apply CLI flags on top of file values; None leaves a value untouched."""
        link = self.link
        if port is not None:
            link = replace(link, port=str(port))
        if baudrate is not None:
            link = replace(link, baudrate=_as_int("link.baudrate", baudrate, minimum=1))
        return replace(self, link=link)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MonitorConfig":
        if not isinstance(data, Mapping):
            raise ConfigError(
                "Config root must be a mapping",
                details={"type": type(data).__name__},
            )
        _reject_unknown("config", data, {"device_id", "timings", "display", "link"})

        kwargs: dict[str, Any] = {}
        if "device_id" in data:
            kwargs["device_id"] = _as_int("device_id", data["device_id"], minimum=0, maximum=0xFF)

        timings = _section(data, "timings")
        if timings:
            allowed = {f.name for f in fields(PollTimings)}
            _reject_unknown("timings", timings, allowed)
            kwargs["timings"] = PollTimings(
                **{k: _as_int(f"timings.{k}", v, minimum=0) for k, v in timings.items()}
            )

        display = _section(data, "display")
        if display:
            _reject_unknown("display", display, {"show_name", "show_telem"})
            for key in ("show_name", "show_telem"):
                if key in display:
                    kwargs[key] = _as_bool(f"display.{key}", display[key])

        link = _section(data, "link")
        if link:
            kwargs["link"] = _link_from_mapping(link)

        return cls(**kwargs)


# ---------------- helpers ----------------

def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(
            f"Config section '{name}' must be a mapping",
            details={"section": name, "type": type(value).__name__},
        )
    return value


def _reject_unknown(where: str, data: Mapping[str, Any], allowed: set[str]) -> None:
    unknown = sorted(str(k) for k in data.keys() if k not in allowed)
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {where}: {', '.join(unknown)}",
            hint=f"Allowed: {', '.join(sorted(allowed))}",
            details={"section": where, "unknown": unknown},
        )


def _as_int(name: str, value: Any, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}", details={"key": name})
    if minimum is not None and value < minimum:
        raise ConfigError(f"'{name}' must be >= {minimum}, got {value}", details={"key": name})
    if maximum is not None and value > maximum:
        raise ConfigError(f"'{name}' must be <= {maximum}, got {value}", details={"key": name})
    return value


def _as_positive_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{name}' must be a number, got {value!r}", details={"key": name})
    if value <= 0:
        raise ConfigError(f"'{name}' must be > 0, got {value}", details={"key": name})
    return float(value)


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ConfigError(f"'{name}' must be true/false, got {value!r}", details={"key": name})


def _link_from_mapping(link: Mapping[str, Any]) -> LinkConfig:
    _reject_unknown("link", link, {f.name for f in fields(LinkConfig)})

    kwargs: dict[str, Any] = {}
    if link.get("port") is not None:
        kwargs["port"] = str(link["port"])
    if "baudrate" in link:
        kwargs["baudrate"] = _as_int("link.baudrate", link["baudrate"], minimum=1)
    for key in ("tick_s", "tick_interval_s"):
        if key in link:
            kwargs[key] = _as_positive_float(f"link.{key}", link[key])
    return LinkConfig(**kwargs)
