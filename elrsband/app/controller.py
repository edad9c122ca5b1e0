# elrsband/app/controller.py
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from elrsband.app.config import MonitorConfig
from elrsband.core.errors import DeviceConnectError, LinkError
from elrsband.protocol.engine import MonitorEngine
from elrsband.runtime.state import PacketInfo
from elrsband.transport.base import Transport
from elrsband.transport.errors import TransportError, TransportOpenError

StatusCallback = Callable[[PacketInfo], None]
StopCondition = Callable[[PacketInfo], bool]


class MonitorController:
    """
    App-level owner of the serial transport and the monitor engine.

    start()/stop() manage the port; tick() and run() drive the engine and
    translate transport failures into ElrsBandError subclasses.
    """

    def __init__(
        self,
        config: MonitorConfig,
        *,
        engine: MonitorEngine,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._config = config
        self._engine = engine
        self._transport = transport
        self._log = logger or logging.getLogger(__name__)
        self._sleep = sleep
        self._monotonic = monotonic

    @property
    def config(self) -> MonitorConfig:
        return self._config

    @property
    def engine(self) -> MonitorEngine:
        return self._engine

    # ---------------- lifecycle ----------------
    def start(self) -> None:
        if self._transport is None:
            self._log.info("LINK_ABSENT no port configured")
            return
        port = self._config.link.port
        try:
            self._transport.open()
        except TransportOpenError as e:
            raise DeviceConnectError(
                f"Could not open serial port {port}: {e}",
                hint="Check the port name and that no other program is using it.",
                details={"port": port},
            ) from e
        self._log.info("LINK_OPEN port=%s baud=%d", port, self._config.link.baudrate)

    def stop(self) -> None:
        if self._transport is None:
            return
        try:
            self._transport.close()
        except TransportError:
            self._log.exception("LINK_CLOSE_ERROR")
        self._log.info("LINK_CLOSED port=%s", self._config.link.port)

    def __enter__(self) -> "MonitorController":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # ---------------- driving ----------------
    def tick(self, allow_requests: bool = True) -> Optional[str]:
        try:
            return self._engine.tick(allow_requests)
        except TransportError as e:
            raise LinkError(
                f"Serial link failed: {e}",
                hint="Check the cable and that the module is powered.",
                details={"port": getattr(e, "port", None)},
            ) from e

    def status(self) -> PacketInfo:
        return self._engine.status()

    def run(
        self,
        *,
        secs: Optional[float] = None,
        until: Optional[StopCondition] = None,
        on_status: Optional[StatusCallback] = None,
    ) -> PacketInfo:
        """
        Tick until `secs` elapse or `until(info)` is true; returns the last status.

        Each iteration ticks once, reports the status, then sleeps out the
        remainder of link.tick_interval_s.
        """
        interval = self._config.link.tick_interval_s
        t0 = self._monotonic()

        while True:
            started = self._monotonic()
            self.tick(True)
            info = self.status()
            if on_status is not None:
                on_status(info)
            if until is not None and until(info):
                return info
            if secs is not None and started - t0 >= secs:
                return info

            remaining = interval - (self._monotonic() - started)
            if remaining > 0:
                self._sleep(remaining)
