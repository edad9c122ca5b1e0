# elrsband/transport/crsf_link.py
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Optional

from elrsband.interfaces.link import RawFrame
from elrsband.protocol.core.defs import ADDR_TX_MODULE
from elrsband.protocol.core.frames import CrsfFrame
from elrsband.protocol.core.parser import FrameParser
from elrsband.protocol.errors import FrameError

from .base import Transport
from .errors import TransportError


class CrsfSerialLink:
    """
    TelemetryLink over a byte transport.

    push() frames and writes immediately. pop() serves queued frames and,
    when the queue is empty, reads whatever the transport has buffered.
    Transport read failures propagate to the caller; write failures are
    logged and reported as False.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        address: int = ADDR_TX_MODULE,
        read_size: int = 256,
        max_queue: int = 64,
        logger: Optional[logging.Logger] = None,
    ):
        self.transport = transport
        self.address = int(address)
        self.read_size = int(read_size)
        self.max_queue = int(max_queue)
        self._log = logger or logging.getLogger(__name__)
        self._parser = FrameParser(logger=self._log)
        self._inbound: Deque[RawFrame] = deque()

    # ---------------- TelemetryLink ----------------
    def push(self, command: int, payload: bytes) -> bool:
        try:
            raw = CrsfFrame(frame_type=command, payload=payload, address=self.address).encode()
        except FrameError:
            self._log.exception("LINK_FRAME_INVALID type=0x%02X", command)
            return False

        try:
            self.transport.write(raw)
            self.transport.flush()
        except TransportError:
            self._log.exception("LINK_SEND_FAILED type=0x%02X len=%d", command, len(raw))
            return False
        return True

    def pop(self) -> Optional[RawFrame]:
        if not self._inbound:
            self._pump_rx()
        if not self._inbound:
            return None
        return self._inbound.popleft()

    # ---------------- RX ----------------
    def _pump_rx(self) -> None:
        data = self.transport.read(self.read_size)
        if not data:
            return
        self._parser.feed(data)

        while True:
            frame = self._parser.get_frame()
            if frame is None:
                break
            if len(self._inbound) >= self.max_queue:
                dropped = self._inbound.popleft()
                self._log.warning("LINK_QUEUE_FULL dropped_type=0x%02X", dropped[0])
            self._inbound.append((frame.frame_type, frame.payload))

    @property
    def queued(self) -> int:
        return len(self._inbound)
