from .colors import hsl_to_rgb, parse_hex_color
from .commands import apply_brightness, brightness_cmd, encode_line, frame_cmd, led_count_cmd
from .patterns import FramePattern, find_pattern, patterns_for
from .scheduler import PatternTask
from .session import ConnectionState, LedSession
from .types import ARRANGEMENTS, BLACK, LedSettings, Rgb

__all__ = [
    "apply_brightness",
    "ARRANGEMENTS",
    "BLACK",
    "brightness_cmd",
    "ConnectionState",
    "encode_line",
    "find_pattern",
    "frame_cmd",
    "FramePattern",
    "hsl_to_rgb",
    "led_count_cmd",
    "LedSession",
    "LedSettings",
    "parse_hex_color",
    "PatternTask",
    "patterns_for",
    "Rgb",
]
