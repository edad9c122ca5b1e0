from __future__ import annotations

import logging
from typing import Optional

from .crc import crc8_dvb_s2
from .defs import MAX_LENGTH_FIELD, MIN_LENGTH_FIELD
from .frames import CrsfFrame


class FrameParser:
    """
    Incremental CRSF parser.

    Wire layout: [address][length][type][payload...][crc8]; length counts
    type + payload + crc. Bad length or CRC drops one byte and resyncs.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.buffer = bytearray()
        self._log = logger or logging.getLogger(__name__)

    # ---------------- Public API ----------------
    def feed(self, data: bytes) -> None:
        """Feed raw bytes into the parser buffer."""
        self.buffer.extend(data)
        self._log.debug(
            "Parser fed %d bytes, buffer_len=%d",
            len(data),
            len(self.buffer),
        )

    def get_frame(self) -> Optional[CrsfFrame]:
        """Parse and return the next complete frame, if available."""
        while True:
            if len(self.buffer) < 2:
                return None  # Not enough bytes for address + length

            length = self.buffer[1]
            if length < MIN_LENGTH_FIELD or length > MAX_LENGTH_FIELD:
                self._log.debug("PARSER_BAD_LENGTH len=%d, skipping byte", length)
                del self.buffer[:1]
                continue

            total_len = length + 2
            if len(self.buffer) < total_len:
                return None  # Wait for more bytes

            body = bytes(self.buffer[2: total_len - 1])
            rx_crc = self.buffer[total_len - 1]
            calc_crc = crc8_dvb_s2(body)
            if calc_crc != rx_crc:
                self._log.debug(
                    "PARSER_CRC_MISMATCH calc=%02X rx=%02X, skipping byte",
                    calc_crc,
                    rx_crc,
                )
                del self.buffer[:1]
                continue

            address = self.buffer[0]
            del self.buffer[:total_len]

            frame = CrsfFrame(frame_type=body[0], payload=body[1:], address=address)
            self._log.debug(
                "Parsed frame addr=%02X type=%s payload_len=%d",
                address,
                frame.type_name,
                len(frame.payload),
            )
            return frame
