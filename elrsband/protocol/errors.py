# elrsband/protocol/errors.py

class ProtocolError(Exception):
    """Base for protocol-level failures (framing/encoding)."""

class FrameError(ProtocolError):
    def __init__(self, frame_type: int, reason: str):
        super().__init__(f"frame 0x{frame_type:02X}: {reason}")
        self.frame_type = frame_type
        self.reason = reason
