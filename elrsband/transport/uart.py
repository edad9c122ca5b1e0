# elrsband/transport/uart.py
from __future__ import annotations

from typing import Optional

import serial
from serial import SerialException

from .base import Transport
from .errors import TransportIOError, TransportOpenError

DEFAULT_BAUDRATE = 400000


class UARTTransport(Transport):
    """
    Non-blocking UART transport implemented via pyserial.

    The port is opened with a zero read timeout so read(n) returns whatever
    is already buffered; the monitor polls it once per tick.
    """

    def __init__(self, port: str, baudrate: int = DEFAULT_BAUDRATE, write_timeout: float = 0.05):
        self.port = port
        self.baudrate = int(baudrate)
        self.write_timeout = float(write_timeout)
        self.ser: Optional[serial.Serial] = None

    def open(self) -> None:
        if self.ser is not None:
            return
        try:
            self.ser = serial.Serial(
                self.port,
                baudrate=self.baudrate,
                timeout=0,
                write_timeout=self.write_timeout,
            )
            self.ser.reset_input_buffer()
        except SerialException as e:
            self.ser = None
            raise TransportOpenError(str(e), port=self.port) from None

    def close(self) -> None:
        if self.ser is not None:
            try:
                self.ser.close()
            finally:
                self.ser = None

    def is_open(self) -> bool:
        return self.ser is not None and self.ser.is_open

    def _require_open(self, op: str) -> serial.Serial:
        if self.ser is None:
            raise TransportIOError(f"{op} while transport not open", port=self.port)
        return self.ser

    def read(self, n: int) -> bytes:
        ser = self._require_open("read")
        try:
            return bytes(ser.read(n))
        except SerialException as e:
            self.ser = None
            raise TransportIOError(f"UART read failed: {e}", port=self.port) from None

    def write(self, data: bytes) -> int:
        ser = self._require_open("write")
        try:
            return ser.write(data) or 0
        except SerialException as e:
            self.ser = None
            raise TransportIOError(f"UART write failed: {e}", port=self.port) from None

    def flush(self) -> None:
        ser = self._require_open("flush")
        try:
            ser.flush()
        except SerialException as e:
            self.ser = None
            raise TransportIOError(f"UART flush failed: {e}", port=self.port) from None
