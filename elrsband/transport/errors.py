# elrsband/transport/errors.py
from __future__ import annotations

from typing import Optional


class TransportError(Exception):
    """Base class for transport-layer failures."""

    def __init__(self, message: str, *, port: Optional[str] = None):
        super().__init__(message)
        self.port = port


class TransportOpenError(TransportError):
    """The port could not be opened (missing, busy, permission denied)."""


class TransportIOError(TransportError):
    """Read/write on an open (or supposedly open) port failed."""
