"""
Fluent builder for BorderConfig.

Usage:
    border = (
        BorderBuilder()
        .padding(1)
        .width(2)
        .with_colors(["#FF0BB0", "#6366F1"])
        .border_type(BorderType.DOUBLE)
        .build()
    )
"""

import logging
from typing import Iterable, Optional, Union

from ..ui.colors import HexColor, as_hex_color
from .config import BorderConfig
from .errors import ConfigurationError
from .glyphs import DEFAULT_GLYPHS, BorderType, Corner, Edge, validate_glyph

logger = logging.getLogger(__name__)

ColorLike = Union[HexColor, str]


class BorderBuilder:
    """
    Staging object that collects border options and produces a BorderConfig.

    Every setter returns the builder so calls can be chained. Constraints that
    are already known are checked as soon as a setter is called; the rest are
    checked once more in build(). Omni/glyph exclusivity is left to the
    renderer since the omni character may be set before or after glyph lists.
    """

    def __init__(self):
        self._visible = True
        self._padding = 1
        self._layer_count = 1
        self._border_type = BorderType.SOLID
        self._omni_char: Optional[str] = None
        self._edges: dict[Edge, list[str]] = {}
        self._corners: dict[Corner, list[str]] = {}
        self._colors: list[HexColor] = []

    def visible(self, visible: bool) -> "BorderBuilder":
        self._visible = bool(visible)
        return self

    def padding(self, padding: int) -> "BorderBuilder":
        if padding < 0:
            raise ConfigurationError(f"border padding cannot be negative, got {padding}")
        self._padding = padding
        return self

    def width(self, width: int) -> "BorderBuilder":
        """Set the number of concentric layers. 0 is accepted here and rejected at render."""
        if width < 0:
            raise ConfigurationError(f"border width cannot be negative, got {width}")
        self._layer_count = width
        return self

    def color(self, color: ColorLike) -> "BorderBuilder":
        """Use a single color for every layer."""
        self._colors = [as_hex_color(color)]
        return self

    def with_color(self, color: ColorLike) -> "BorderBuilder":
        """Append the color for the next layer."""
        self._check_color_count(len(self._colors) + 1)
        self._colors.append(as_hex_color(color))
        return self

    def with_colors(self, colors: Iterable[ColorLike]) -> "BorderBuilder":
        """Set one color per layer, outermost first."""
        colors = [as_hex_color(c) for c in colors]
        self._check_color_count(len(colors))
        self._colors = colors
        return self

    def border_type(self, border_type: BorderType) -> "BorderBuilder":
        """Choose the default glyphs for every edge and corner not set explicitly."""
        self._border_type = border_type
        return self

    def border_char(self, char: str) -> "BorderBuilder":
        """Draw a single frame (width 1) with one glyph, ignoring per-edge glyphs."""
        self._omni_char = validate_glyph(char)
        self._layer_count = 1
        return self

    def vertical_border_char(self, chars: Iterable[str]) -> "BorderBuilder":
        """Per-layer glyphs for the left and right edges."""
        chars = self._glyph_list(chars)
        self._edges[Edge.LEFT] = list(chars)
        self._edges[Edge.RIGHT] = list(chars)
        return self

    def horizontal_border_char(self, chars: Iterable[str]) -> "BorderBuilder":
        """Per-layer glyphs for the top and bottom edges."""
        chars = self._glyph_list(chars)
        self._edges[Edge.TOP] = list(chars)
        self._edges[Edge.BOTTOM] = list(chars)
        return self

    def edge_char(self, edge: Edge, chars: Iterable[str]) -> "BorderBuilder":
        self._edges[edge] = self._glyph_list(chars)
        return self

    def corner_char(self, corner: Corner, chars: Iterable[str]) -> "BorderBuilder":
        self._corners[corner] = self._glyph_list(chars)
        return self

    def build(self) -> BorderConfig:
        """Finish the configuration. The builder can keep being used afterwards."""
        # Zero width is reported by the renderer, which gives the clearer error
        if self._layer_count:
            self._check_color_count(len(self._colors))

        defaults = DEFAULT_GLYPHS[self._border_type]
        edges = {}
        for edge in Edge:
            if edge in self._edges:
                edges[edge] = tuple(self._edges[edge])
            else:
                edges[edge] = (defaults.edge(edge),) * max(self._layer_count, 1)
        corners = {}
        for corner in Corner:
            if corner in self._corners:
                corners[corner] = tuple(self._corners[corner])
            else:
                corners[corner] = (defaults.corner(corner),) * max(self._layer_count, 1)

        config = BorderConfig(
            visible=self._visible,
            padding=self._padding,
            layer_count=self._layer_count,
            border_type=self._border_type,
            omni_char=self._omni_char,
            edge_glyphs=edges,
            corner_glyphs=corners,
            colors=tuple(self._colors),
        )
        logger.debug(
            "Built border: type=%s layers=%d padding=%d colors=%d omni=%r",
            config.border_type.value, config.layer_count, config.padding,
            len(config.colors), config.omni_char,
        )
        return config

    def _check_color_count(self, count: int):
        if count > self._layer_count:
            raise ConfigurationError(
                f"{count} colors given for a border of width {self._layer_count}"
            )

    @staticmethod
    def _glyph_list(chars: Iterable[str]) -> list[str]:
        # A plain string is treated as a sequence of per-layer glyphs
        return [validate_glyph(c) for c in chars]
