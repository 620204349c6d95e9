"""
Border glyph tables.

Unicode box-drawing characters for each border type, plus the fallback
lookup shared by glyph and color resolution.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TypeVar

from wcwidth import wcwidth

from .errors import ConfigurationError

T = TypeVar("T")


class BorderType(Enum):
    SOLID = "solid"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOUBLE = "double"

    @classmethod
    def from_name(cls, name: str) -> "BorderType":
        """Look up a border type by its (case-insensitive) name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ConfigurationError(f"unknown border type {name!r} (expected one of: {choices})")


class Edge(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (Edge.LEFT, Edge.RIGHT)


class Corner(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class GlyphSet:
    """Default glyphs for one border type."""
    vertical: str
    horizontal: str
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    def edge(self, edge: Edge) -> str:
        return self.vertical if edge.is_vertical else self.horizontal

    def corner(self, corner: Corner) -> str:
        return getattr(self, corner.value)


DEFAULT_GLYPHS = {
    BorderType.SOLID: GlyphSet("│", "─"),
    BorderType.DOTTED: GlyphSet("┊", "┈"),   # Quadruple dash
    BorderType.DASHED: GlyphSet("╎", "╌"),   # Double dash
    BorderType.DOUBLE: GlyphSet("║", "═"),
}


def resolve(values: Sequence[T], index: int, default: T) -> T:
    """
    Pick values[index], else the last value, else default.

    Used for both per-layer glyphs and per-layer colors.
    """
    if index < len(values):
        return values[index]
    if values:
        return values[-1]
    return default


def validate_glyph(glyph: str) -> str:
    """Check that glyph is one character that takes exactly one terminal cell."""
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ConfigurationError(f"border glyph must be a single character, got {glyph!r}")
    if wcwidth(glyph) != 1:
        raise ConfigurationError(f"border glyph {glyph!r} does not occupy exactly one cell")
    return glyph
