"""
Top-level screen layer.

Owns the border drawn around the whole terminal window together with the
screen-wide colors, title, cursor and text settings.
"""

from dataclasses import dataclass, field
from typing import Optional

from .border import BorderBuilder, BorderConfig, BorderRenderer
from .font import FontStyle, TextAlignment
from .ui.colors import BLACK, WHITE, HexColor
from .ui.primitives import CellSink, get_window_size


@dataclass
class BaseLayer:
    """The full-window layer everything else is drawn on."""
    window_size: tuple[int, int]
    border: BorderConfig = field(default_factory=lambda: BorderBuilder().build())
    background_color: HexColor = BLACK
    foreground_color: HexColor = WHITE
    title: Optional[str] = None
    cursor_visible: bool = True
    default_cursor_position: tuple[int, int] = (0, 0)
    text_alignment: TextAlignment = TextAlignment.LEFT
    font_style: FontStyle = field(default_factory=FontStyle)

    @classmethod
    def create(cls, border: BorderConfig = None, **kwargs) -> "BaseLayer":
        """Create a layer sized to the current terminal."""
        if border is not None:
            kwargs["border"] = border
        return cls(window_size=get_window_size(), **kwargs)

    def refresh_window_size(self) -> tuple[int, int]:
        """Re-query the terminal size (call after a resize)."""
        self.window_size = get_window_size()
        return self.window_size

    def render(self, sink: CellSink, debug: bool = False) -> int:
        """Draw the border at the current window size. Returns cells written."""
        return BorderRenderer(self.border).render(self.window_size, sink, debug=debug)
