# elrsband/protocol/_internal/pending_request.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PendingRequest:
    """The single in-flight parameter read, possibly spanning several chunks."""

    field_id: int
    started_at: int
    chunk_index: int = 0
    buffer: bytearray = field(default_factory=bytearray)

    @property
    def mid_sequence(self) -> bool:
        return self.chunk_index > 0

    def age(self, now: int) -> int:
        return now - self.started_at

    def expired(self, now: int, timeout: int) -> bool:
        return self.age(now) > timeout

    def append(self, data: bytes) -> None:
        self.buffer.extend(data)

    def advance(self, now: int) -> int:
        """Move to the next chunk; the timeout clock restarts per chunk."""
        self.chunk_index += 1
        self.started_at = now
        return self.chunk_index
