from __future__ import annotations

from dataclasses import dataclass

from elrsband.protocol.errors import FrameError
from ..crc import crc8_dvb_s2
from ..defs import (
    ADDR_TX_MODULE,
    CMD_DEVICE_INFO_REQ,
    CMD_PARAM_CHUNK_REQ,
    MAX_PAYLOAD,
    RESP_DEVICE_INFO,
    RESP_PARAM_ENTRY,
)

TYPE_NAMES = {
    CMD_DEVICE_INFO_REQ: "DEVICE_PING",
    RESP_DEVICE_INFO: "DEVICE_INFO",
    RESP_PARAM_ENTRY: "PARAMETER_ENTRY",
    CMD_PARAM_CHUNK_REQ: "PARAMETER_READ",
}


@dataclass
class CrsfFrame:
    frame_type: int
    payload: bytes = b""
    address: int = ADDR_TX_MODULE

    def __post_init__(self) -> None:
        self.frame_type = int(self.frame_type) & 0xFF
        self.address = int(self.address) & 0xFF
        self.payload = bytes(self.payload)
        if len(self.payload) > MAX_PAYLOAD:
            raise FrameError(
                self.frame_type,
                f"payload too long: {len(self.payload)} > {MAX_PAYLOAD}",
            )

    @property
    def length_field(self) -> int:
        # type + payload + crc
        return len(self.payload) + 2

    def encode(self) -> bytes:
        body = bytes((self.frame_type,)) + self.payload
        return bytes((self.address, self.length_field)) + body + bytes((crc8_dvb_s2(body),))

    @property
    def type_name(self) -> str:
        return TYPE_NAMES.get(self.frame_type, f"TYPE_{self.frame_type}")
