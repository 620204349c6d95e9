"""
Cell-write primitive.

A sink receives "put this character at (x, y) in this color" requests and
writes them out on flush(). The renderer only ever talks to a sink, so tests
can swap in one that records calls instead of drawing.
"""

import sys
from typing import Optional, Protocol, TextIO

from ..colors import RGB, Colors, bg_rgb, rgb


class CellSink(Protocol):
    def write_cell(self, x: int, y: int, char: str,
                   fg: Optional[RGB] = None, bg: Optional[RGB] = None) -> None: ...

    def flush(self) -> None: ...


def move_to(x: int, y: int) -> str:
    """Cursor position escape. Terminal rows/columns are 1-based."""
    return f"\x1b[{y + 1};{x + 1}H"


class AnsiCellSink:
    """
    Buffers ANSI escape sequences and writes them to a stream in one go.

    Usage:
        sink = AnsiCellSink()
        sink.write_cell(0, 0, "┌", fg=(255, 255, 255))
        sink.flush()
    """

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout
        self._buffer: list[str] = []

    def write_cell(self, x: int, y: int, char: str,
                   fg: Optional[RGB] = None, bg: Optional[RGB] = None):
        parts = [move_to(x, y)]
        if fg is not None:
            parts.append(rgb(*fg))
        if bg is not None:
            parts.append(bg_rgb(*bg))
        parts.append(char)
        if fg is not None or bg is not None:
            parts.append(Colors.RESET)
        self._buffer.append("".join(parts))

    @property
    def pending(self) -> int:
        """Number of cell writes waiting for flush()."""
        return len(self._buffer)

    def flush(self):
        """Write everything buffered so far. OSError from the stream propagates."""
        data = "".join(self._buffer)
        self._buffer.clear()
        if data:
            self.stream.write(data)
        self.stream.flush()
