# elrsband/core/errors.py
from __future__ import annotations


class ElrsBandError(Exception):
    """
    Base class for expected operational errors outside the monitor core.
    """

    #: Stable machine-readable identifier (CLI exit mapping, log fields)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Configuration errors (nothing opened yet)
# ---------------------------------------------------------------------------

class ConfigError(ElrsBandError):
    """
    Configuration file or CLI values are unusable.

    Examples:
      - YAML syntax error or non-mapping document
      - unknown key in a section
      - negative timing value, non-integer device id
    """
    code = "config_error"


# ---------------------------------------------------------------------------
# Serial link errors
# ---------------------------------------------------------------------------

class DeviceConnectError(ElrsBandError):
    """
    The serial port to the TX module could not be opened.

    Examples:
      - port name does not exist
      - permission denied
      - port held by another program
    """
    code = "device_connect_error"


class LinkError(ElrsBandError):
    """
    The serial port failed after it was opened (cable pulled, I/O error).
    """
    code = "link_error"
