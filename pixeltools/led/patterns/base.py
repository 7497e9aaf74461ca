from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..types import Rgb

FrameRenderer = Callable[[int, int], List[Rgb]]


@dataclass(frozen=True)
class FramePattern:
    """Named animation: `render(frame, led_count)` gives one color per LED."""

    name: str
    interval_ms: int
    render: FrameRenderer
    setup: Optional[Callable[[int], None]] = None

    def init(self, led_count: int) -> None:
        if self.setup is not None:
            self.setup(led_count)

    def colors_for_frame(self, frame: int, led_count: int) -> List[Rgb]:
        colors = self.render(frame, led_count)
        if len(colors) != led_count:
            raise RuntimeError(f"Pattern '{self.name}' produced {len(colors)} colors for {led_count} LEDs")
        return colors


def matrix_size(led_count: int) -> int:
    """Side length of the square grid holding `led_count` LEDs."""
    size = 1
    while size * size < led_count:
        size += 1
    return size
