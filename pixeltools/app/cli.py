from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from ..conversion import (
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    ConversionSettings,
    ImageToOtbBuilder,
    OtbConverter,
    suggest_output_name,
)
from ..led import ARRANGEMENTS, LedSession, LedSettings, find_pattern, parse_hex_color, patterns_for
from ..led.types import SERIAL_PORT_ENV_VAR
from ..otb import parse_otb
from ..transport.serial import SerialLink
from .diagnostics import emit_startup_warnings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixeltools",
        description="Nokia OTB bitmap conversion and serial LED control.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log sent commands and device replies")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    otb2bmp = sub.add_parser("otb2bmp", help="Convert an OTB file to BMP (or PNG)")
    otb2bmp.add_argument("path", help="OTB file to convert")
    otb2bmp.add_argument("-o", "--output", help="Output path (default: input name with .bmp/.png)")
    otb2bmp.add_argument("--png", action="store_true", help="Write PNG instead of BMP")

    info = sub.add_parser("info", help="Show OTB header information")
    info.add_argument("path", help="OTB file to inspect")

    img2otb = sub.add_parser("img2otb", help="Convert an image (.png/.jpg/.gif/.bmp) to OTB")
    img2otb.add_argument("path", help="Image file to convert")
    img2otb.add_argument("-o", "--output", help="Output path (default: input name with .otb)")
    img2otb.add_argument("--no-dither", action="store_true", help="Threshold instead of dithering")
    img2otb.add_argument("--max-width", type=int, default=DEFAULT_MAX_WIDTH, help="Maximum width (1-255)")
    img2otb.add_argument("--max-height", type=int, default=DEFAULT_MAX_HEIGHT, help="Maximum height (1-255)")

    led = sub.add_parser("led", help="Drive addressable LEDs over a serial port")
    led.add_argument("--serial", metavar="PATH", help=f"Serial port (default: ${SERIAL_PORT_ENV_VAR})")
    led.add_argument("--count", type=int, help="Number of LEDs")
    led.add_argument("--arrangement", choices=ARRANGEMENTS, help="LED layout")
    led.add_argument("--brightness", type=int, help="Global brightness (0-255)")
    action = led.add_mutually_exclusive_group(required=True)
    action.add_argument("--list-patterns", action="store_true", help="List patterns for the arrangement and exit")
    action.add_argument("--pattern", metavar="NAME", help="Run a named pattern")
    action.add_argument("--fill", metavar="#RRGGBB", help="Set every LED to one color")
    action.add_argument("--clear", action="store_true", help="Turn every LED off")
    action.add_argument("--random", action="store_true", help="Set every LED to a random color")
    led.add_argument("--frames", type=int, help="Stop a pattern after this many frames (default: run until Ctrl-C)")
    return parser


def _write_output(path: str, payload: bytes) -> None:
    with open(path, "wb") as handle:
        handle.write(payload)


def otb_to_bmp(args: argparse.Namespace) -> int:
    settings = ConversionSettings(output_format="png" if args.png else "bmp")
    result = OtbConverter(settings).convert_file(args.path)
    output = args.output or os.path.join(os.path.dirname(args.path), result.output_name)
    _write_output(output, result.payload)
    print(f"{result.image.width}x{result.image.height} -> {output} ({len(result.payload)} bytes)")
    return 0


def show_info(args: argparse.Namespace) -> int:
    with open(args.path, "rb") as handle:
        data = handle.read()
    image = parse_otb(data)
    size = len(data)
    name = os.path.basename(args.path)
    print(f"Filename: {name} | Size: {size} bytes | Dimensions: {image.width} x {image.height}")
    return 0


def image_to_otb(args: argparse.Namespace) -> int:
    settings = ConversionSettings(
        dither=not args.no_dither,
        max_width=args.max_width,
        max_height=args.max_height,
    )
    data = ImageToOtbBuilder(settings).build_from_file(args.path)
    output = args.output or suggest_output_name(args.path, ".otb")
    _write_output(output, data)
    print(f"{data[1]}x{data[2]} -> {output} ({len(data)} bytes)")
    return 0


def _led_settings(args: argparse.Namespace) -> LedSettings:
    settings = LedSettings()
    if args.serial:
        settings.port = args.serial
    if args.count is not None:
        settings.led_count = args.count
    if args.arrangement:
        settings.arrangement = args.arrangement
    if args.brightness is not None:
        settings.brightness = args.brightness
    settings.validate()
    return settings


def list_patterns(settings: LedSettings) -> int:
    for pattern in patterns_for(settings.arrangement):
        print(f"{pattern.name} ({pattern.interval_ms} ms)")
    return 0


def control_leds(args: argparse.Namespace) -> int:
    settings = _led_settings(args)
    if args.list_patterns:
        return list_patterns(settings)
    if not settings.port:
        raise RuntimeError(f"Missing serial port: pass --serial or set {SERIAL_PORT_ENV_VAR}")
    if args.frames is not None and args.frames <= 0:
        raise ValueError("--frames must be greater than zero")
    if args.frames is not None and not args.pattern:
        raise ValueError("--frames only applies to --pattern")
    pattern = find_pattern(settings.arrangement, args.pattern) if args.pattern else None
    color = parse_hex_color(args.fill) if args.fill else None
    emit_startup_warnings(need_serial=True)

    async def run() -> None:
        link = SerialLink(settings.port, settings.baud_rate)
        session = LedSession(link, settings, on_status=print)
        try:
            await session.connect()
            if pattern is not None:
                await session.run_pattern(pattern, frames=args.frames)
                await session.wait_pattern()
            elif color is not None:
                await session.fill(color)
            elif args.clear:
                await session.clear()
            elif args.random:
                await session.random_colors()
        finally:
            await session.disconnect()

    asyncio.run(run())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handlers = {
        "otb2bmp": otb_to_bmp,
        "info": show_info,
        "img2otb": image_to_otb,
        "led": control_leds,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return 2
    try:
        return handler(args)
    except KeyboardInterrupt:
        return 130
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
