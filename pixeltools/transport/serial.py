from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

SERIAL_BAUD_RATE = 115200

logger = logging.getLogger(__name__)


def _import_serial():
    try:
        import serial
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("pyserial is required. Install with: pip install pyserial") from exc
    return serial


class SerialLink:
    """Line-oriented pyserial connection with asyncio wrappers."""

    def __init__(self, port: str, baud_rate: int = SERIAL_BAUD_RATE, timeout: float = 1.0) -> None:
        self._port = port
        self._baud_rate = baud_rate
        self._timeout = timeout
        self._serial: Optional[Any] = None

    @property
    def port(self) -> str:
        return self._port

    @property
    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

    async def open(self) -> None:
        await self._run(self._open_blocking)

    async def close(self) -> None:
        await self._run(self._close_blocking)

    async def write(self, data: bytes) -> None:
        await self._run(self._write_blocking, data)

    async def read_line(self) -> str:
        """Read one line; returns "" when the read times out."""
        return await self._run(self._read_line_blocking)

    @staticmethod
    async def _run(func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    def _open_blocking(self) -> None:
        serial = _import_serial()
        try:
            self._serial = serial.Serial(
                self._port, self._baud_rate, timeout=self._timeout, write_timeout=5
            )
        except Exception as exc:
            raise RuntimeError(f"Serial connection failed: {exc}") from exc
        logger.info("Opened %s at %d baud", self._port, self._baud_rate)

    def _close_blocking(self) -> None:
        ser, self._serial = self._serial, None
        if ser is None:
            return
        try:
            ser.close()
        except Exception as exc:
            raise RuntimeError(f"Serial close failed: {exc}") from exc
        logger.info("Closed %s", self._port)

    def _write_blocking(self, data: bytes) -> None:
        ser = self._require_open()
        try:
            ser.write(data)
            ser.flush()
        except Exception as exc:
            raise RuntimeError(f"Serial connection failed: {exc}") from exc

    def _read_line_blocking(self) -> str:
        ser = self._require_open()
        try:
            raw = ser.readline()
        except Exception as exc:
            raise RuntimeError(f"Serial read failed: {exc}") from exc
        return raw.decode("utf-8", errors="replace")

    def _require_open(self):
        if self._serial is None:
            raise RuntimeError(f"Serial port {self._port} is not open")
        return self._serial
