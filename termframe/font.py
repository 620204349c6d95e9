"""
Text styling metadata.

Carried by the screen layer alongside the border; the border itself never
reads it.
"""

from dataclasses import dataclass
from enum import Enum


class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class FontStyle:
    bold: bool = False
    italic: bool = False
    underline: bool = False
