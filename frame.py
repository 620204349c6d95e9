#!/usr/bin/env python3
"""
termframe - Draw a layered border around the terminal window.

Renders the configured border, holds it on screen for a few seconds, then
restores the terminal and reports the window size.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from termframe.border import BorderType, ConfigurationError
from termframe.config import FrameSettings
from termframe.screen import BaseLayer
from termframe.ui import AnsiCellSink, HexColor, terminal_session

logger = logging.getLogger("termframe")


def build_settings(args: argparse.Namespace) -> FrameSettings:
    """Load the settings file (if any) and apply command line overrides."""
    settings = FrameSettings.load(Path(args.config)) if args.config else FrameSettings()
    border = settings.border
    if args.padding is not None:
        border.padding = args.padding
    if args.width is not None:
        border.width = args.width
    if args.type is not None:
        border.border_type = args.type
    if args.color:
        border.colors = list(args.color)
    if args.char is not None:
        border.border_char = args.char
    return settings


def run(settings: FrameSettings, seconds: float, debug: bool = False) -> tuple[int, int]:
    """Draw the frame and hold it. Returns the window size it was drawn at."""
    border = settings.border.to_builder().build()
    layer = BaseLayer.create(
        border=border,
        background_color=HexColor(settings.background),
        foreground_color=HexColor(settings.foreground),
        title=settings.title,
    )
    with terminal_session() as stream:
        cells = layer.render(AnsiCellSink(stream), debug=debug)
        logger.info("Drew %d border cells at %dx%d", cells, *layer.window_size)
        time.sleep(seconds)
    return layer.window_size


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="termframe - Draw a layered border around the terminal"
    )
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument("--padding", type=int, help="Cells between the window edge and the border")
    parser.add_argument("--width", type=int, help="Number of border layers")
    parser.add_argument(
        "--type",
        choices=[t.value for t in BorderType],
        help="Default glyph set",
    )
    parser.add_argument(
        "--color",
        action="append",
        help="Layer color as #RRGGBB, outermost first (repeatable)",
    )
    parser.add_argument("--char", help="Draw a single frame using only this character")
    parser.add_argument("--seconds", type=float, default=5.0, help="How long to show the border")
    parser.add_argument("--debug", action="store_true", help="Highlight the padding area")
    parser.add_argument("--log-file", help="Write log output to this file")
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )

    try:
        width, height = run(build_settings(args), args.seconds, debug=args.debug)
    except ConfigurationError as e:
        print(f"Invalid border configuration: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(130)

    print(f"Window size: {width} columns, {height} rows")


if __name__ == "__main__":
    main()
