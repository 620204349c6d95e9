"""
User interface module.

Handles colors, cell output and the terminal itself.
"""

from .colors import Colors, HexColor, rgb, bg_rgb, to_rgb, as_hex_color, WHITE, BLACK
from .primitives import (
    CellSink,
    AnsiCellSink,
    get_window_size,
    terminal_session,
)

__all__ = [
    # Colors
    "Colors",
    "HexColor",
    "rgb",
    "bg_rgb",
    "to_rgb",
    "as_hex_color",
    "WHITE",
    "BLACK",
    # Primitives
    "CellSink",
    "AnsiCellSink",
    "get_window_size",
    "terminal_session",
]
