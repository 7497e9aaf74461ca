from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from .patterns import FramePattern
from .types import Rgb

FrameCallback = Callable[[List[Rgb]], Awaitable[None]]

logger = logging.getLogger(__name__)


class PatternTask:
    """Runs one pattern at its frame interval until cancelled.

    Starting a new pattern cancels the previous one first, so at most one
    frame loop is alive per task object.
    """

    def __init__(self) -> None:
        self._task: Optional["asyncio.Task[None]"] = None
        self._pattern: Optional[FramePattern] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pattern(self) -> Optional[FramePattern]:
        return self._pattern if self.running else None

    async def start(
        self,
        pattern: FramePattern,
        led_count: int,
        on_frame: FrameCallback,
        frames: Optional[int] = None,
    ) -> None:
        await self.cancel()
        pattern.init(led_count)
        self._pattern = pattern
        self._task = asyncio.create_task(self._loop(pattern, led_count, on_frame, frames))
        logger.debug("Started pattern %s", pattern.name)

    async def cancel(self) -> None:
        task, self._task = self._task, None
        self._pattern = None
        if task is None:
            return
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                logger.error("Pattern stopped with error: %s", task.exception())
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def wait(self) -> None:
        """Wait for a bounded run to finish; re-raises frame errors."""
        if self._task is not None:
            await self._task

    @staticmethod
    async def _loop(
        pattern: FramePattern,
        led_count: int,
        on_frame: FrameCallback,
        frames: Optional[int],
    ) -> None:
        interval = max(0.0, pattern.interval_ms / 1000.0)
        frame = 0
        while frames is None or frame < frames:
            await on_frame(pattern.colors_for_frame(frame, led_count))
            frame += 1
            await asyncio.sleep(interval)
