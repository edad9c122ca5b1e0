# elrsband/app/runner.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from elrsband.app.config import MonitorConfig
from elrsband.app.controller import MonitorController
from elrsband.common.clock import MonotonicClock
from elrsband.interfaces.link import TickClock
from elrsband.protocol.engine import MonitorEngine
from elrsband.transport.base import Transport
from elrsband.transport.crsf_link import CrsfSerialLink
from elrsband.transport.uart import UARTTransport


@dataclass(frozen=True)
class AppRun:
    controller: MonitorController
    engine: MonitorEngine
    transport: Optional[Transport]
    link: Optional[CrsfSerialLink]


def start_run(
    cfg: MonitorConfig,
    *,
    transport: Optional[Transport] = None,
    clock: Optional[TickClock] = None,
) -> AppRun:
    """
    Wire transport -> serial link -> engine -> controller.

    With no explicit transport and no configured port the engine runs
    without a link and reports CRSF as unavailable.
    """
    log = logging.getLogger(__name__)

    if transport is None and cfg.link.port:
        transport = UARTTransport(cfg.link.port, baudrate=cfg.link.baudrate)

    link = CrsfSerialLink(transport, logger=logging.getLogger("elrsband.link")) if transport else None
    clock = clock or MonotonicClock(tick_s=cfg.link.tick_s)

    engine = MonitorEngine.create(
        link,
        clock,
        timings=cfg.timings,
        device_id=cfg.device_id,
        logger=logging.getLogger("elrsband.engine"),
    )

    controller = MonitorController(cfg, engine=engine, transport=transport, logger=log)

    return AppRun(controller=controller, engine=engine, transport=transport, link=link)
