from __future__ import annotations

from .base import CrsfFrame
from ..defs import (
    ADDR_TX_MODULE,
    CMD_DEVICE_INFO_REQ,
    CMD_PARAM_CHUNK_REQ,
    DEVICE_INFO_REQ_PAYLOAD,
)


class CommandFrame(CrsfFrame):
    """Handset → module request frame."""

    def __init__(self, frame_type: int, payload: bytes = b"", address: int = ADDR_TX_MODULE):
        super().__init__(frame_type=frame_type, payload=payload, address=address)

    @classmethod
    def device_info_request(cls) -> "CommandFrame":
        return cls(CMD_DEVICE_INFO_REQ, DEVICE_INFO_REQ_PAYLOAD)

    @classmethod
    def param_chunk_request(
        cls,
        device_id: int,
        handset_address: int,
        field_id: int,
        chunk_index: int,
    ) -> "CommandFrame":
        payload = bytes(
            (
                int(device_id) & 0xFF,
                int(handset_address) & 0xFF,
                int(field_id) & 0xFF,
                int(chunk_index) & 0xFF,
            )
        )
        return cls(CMD_PARAM_CHUNK_REQ, payload, address=device_id)
