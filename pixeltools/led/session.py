from __future__ import annotations

import asyncio
import enum
import logging
import random
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from .commands import brightness_cmd, encode_line, frame_cmd, led_count_cmd
from .patterns import FramePattern, patterns_for
from .scheduler import PatternTask
from .types import (
    BLACK,
    LedSettings,
    Rgb,
    validate_arrangement,
    validate_brightness,
    validate_led_count,
)

logger = logging.getLogger(__name__)


class Link(Protocol):
    async def open(self) -> None: ...

    async def close(self) -> None: ...

    async def write(self, data: bytes) -> None: ...

    async def read_line(self) -> str: ...


class ConnectionState(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTING = "disconnecting"


class LedSession:
    """LED state plus the device connection that mirrors it.

    Local state (colors, brightness, layout) always updates; commands only
    reach the device while the session is connected.
    """

    def __init__(
        self,
        link: Link,
        settings: Optional[LedSettings] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.settings = settings or LedSettings()
        self.settings.validate()
        self._link = link
        self._on_status = on_status
        self._state = ConnectionState.DISCONNECTED
        self._status = "Disconnected"
        self._leds: List[Rgb] = [BLACK] * self.settings.led_count
        self._pattern_task = PatternTask()
        self._reader: Optional["asyncio.Task[None]"] = None
        self._write_lock: Optional[asyncio.Lock] = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def status(self) -> str:
        return self._status

    @property
    def leds(self) -> Tuple[Rgb, ...]:
        return tuple(self._leds)

    @property
    def led_count(self) -> int:
        return self.settings.led_count

    @property
    def brightness(self) -> int:
        return self.settings.brightness

    @property
    def patterns(self) -> Sequence[FramePattern]:
        return patterns_for(self.settings.arrangement)

    @property
    def pattern_running(self) -> bool:
        return self._pattern_task.running

    async def connect(self) -> None:
        if self._state is not ConnectionState.DISCONNECTED:
            raise RuntimeError(f"Cannot connect while {self._state.value}")
        self._state = ConnectionState.CONNECTING
        try:
            await self._link.open()
        except Exception:
            self._state = ConnectionState.DISCONNECTED
            self._set_status("Connection failed")
            raise
        self._state = ConnectionState.CONNECTED
        try:
            await self.send_command(led_count_cmd(self.settings.led_count))
            await self.send_command(brightness_cmd(self.settings.brightness))
        except Exception:
            try:
                await self._link.close()
            finally:
                self._state = ConnectionState.DISCONNECTED
                self._set_status("Connection failed")
            raise
        self._set_status("Connected")
        self._reader = asyncio.create_task(self._read_loop())

    async def disconnect(self) -> None:
        await self._pattern_task.cancel()
        if self._state is not ConnectionState.CONNECTED:
            return
        self._state = ConnectionState.DISCONNECTING
        try:
            await self._stop_reader()
            await self._link.close()
        finally:
            self._state = ConnectionState.DISCONNECTED
            self._set_status("Disconnected")

    async def send_command(self, command: str) -> bool:
        """Send one command line; returns False when not connected."""
        if not self.connected:
            logger.debug("Not connected, dropped: %s", command)
            return False
        async with self._writer_lock():
            await self._link.write(encode_line(command))
        logger.debug("Sent: %s", command)
        return True

    async def send_frame(self) -> bool:
        return await self.send_command(frame_cmd(self._leds, self.settings.brightness))

    async def set_layout(self, led_count: int, arrangement: Optional[str] = None) -> None:
        validate_led_count(led_count)
        if arrangement is not None:
            validate_arrangement(arrangement)
            self.settings.arrangement = arrangement
        await self._pattern_task.cancel()
        self.settings.led_count = led_count
        self._leds = [BLACK] * led_count
        await self.send_command(led_count_cmd(led_count))

    async def set_led(self, index: int, color: Rgb) -> None:
        if not 0 <= index < len(self._leds):
            raise ValueError(f"LED index {index} out of range 0-{len(self._leds) - 1}")
        self._leds[index] = color
        await self.send_frame()

    async def fill(self, color: Rgb) -> None:
        await self._pattern_task.cancel()
        self._leds = [color] * self.settings.led_count
        await self.send_frame()

    async def clear(self) -> None:
        await self.fill(BLACK)

    async def random_colors(self, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        await self._pattern_task.cancel()
        self._leds = [
            Rgb(rng.randrange(256), rng.randrange(256), rng.randrange(256))
            for _ in range(self.settings.led_count)
        ]
        await self.send_frame()

    async def set_brightness(self, value: int) -> None:
        validate_brightness(value)
        self.settings.brightness = value
        await self.send_command(brightness_cmd(value))
        await self.send_frame()

    async def run_pattern(self, pattern: FramePattern, frames: Optional[int] = None) -> None:
        await self._pattern_task.start(pattern, self.settings.led_count, self._show_frame, frames)

    async def wait_pattern(self) -> None:
        await self._pattern_task.wait()

    async def stop_pattern(self) -> None:
        await self._pattern_task.cancel()

    def handle_device_text(self, text: str) -> None:
        for line in text.split("\n"):
            line = line.strip()
            if line:
                logger.info("Device: %s", line)
                self._set_status(f"Device: {line}")

    async def _show_frame(self, colors: List[Rgb]) -> None:
        self._leds = list(colors)
        await self.send_frame()

    async def _read_loop(self) -> None:
        while self.connected:
            try:
                text = await self._link.read_line()
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                if self.connected:
                    logger.error("Serial read error: %s", exc)
                    self._set_status(f"Read error: {exc}")
                return
            if text:
                self.handle_device_text(text)
            else:
                await asyncio.sleep(0)

    async def _stop_reader(self) -> None:
        reader, self._reader = self._reader, None
        if reader is None:
            return
        reader.cancel()
        try:
            await reader
        except asyncio.CancelledError:
            pass

    def _writer_lock(self) -> asyncio.Lock:
        # One command line on the wire at a time.
        if self._write_lock is None:
            self._write_lock = asyncio.Lock()
        return self._write_lock

    def _set_status(self, message: str) -> None:
        self._status = message
        if self._on_status is not None:
            self._on_status(message)
