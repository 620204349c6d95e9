"""
Low-level terminal primitives.

Cell writes and terminal lifecycle; no knowledge of borders.
"""

from .cells import CellSink, AnsiCellSink, move_to
from .terminal import (
    get_window_size,
    raw_terminal,
    terminal_session,
)

__all__ = [
    "CellSink",
    "AnsiCellSink",
    "move_to",
    "get_window_size",
    "raw_terminal",
    "terminal_session",
]
