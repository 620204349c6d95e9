"""
Shared color definitions for terminal output.

Hex colors are converted to RGB triples and then to 24-bit ANSI escapes.
"""

import string
from dataclasses import dataclass
from typing import Union


RGB = tuple[int, int, int]


class Colors:
    RESET = "\x1b[0m"


# Background used to mark padding cells in debug mode (dark green)
DEBUG_BACKGROUND: RGB = (0, 100, 0)


def rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def bg_rgb(r: int, g: int, b: int) -> str:
    return f"\x1b[48;2;{r};{g};{b}m"


def _parse_component(code: str, start: int) -> int:
    """Parse two hex digits at start, 0 if they are missing or malformed."""
    pair = code[start:start + 2]
    if len(pair) != 2 or any(c not in string.hexdigits for c in pair):
        return 0
    return int(pair, 16)


@dataclass(frozen=True)
class HexColor:
    """A color written as '#RRGGBB'."""
    code: str

    def to_rgb(self) -> RGB:
        """
        Convert to an (r, g, b) triple.

        Each component is parsed on its own; a component that is not two
        valid hex digits resolves to 0 instead of raising.
        """
        return (
            _parse_component(self.code, 1),
            _parse_component(self.code, 3),
            _parse_component(self.code, 5),
        )

    def __str__(self) -> str:
        return self.code


WHITE = HexColor("#FFFFFF")
BLACK = HexColor("#000000")


def as_hex_color(color: Union[HexColor, str]) -> HexColor:
    """Accept either a HexColor or a plain '#RRGGBB' string."""
    if isinstance(color, HexColor):
        return color
    return HexColor(str(color))


def to_rgb(color: Union[HexColor, str]) -> RGB:
    return as_hex_color(color).to_rgb()
