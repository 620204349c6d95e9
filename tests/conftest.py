"""Pytest configuration and fixtures."""

from dataclasses import dataclass
from typing import Optional

import pytest


@dataclass
class CellWrite:
    x: int
    y: int
    char: str
    fg: Optional[tuple] = None
    bg: Optional[tuple] = None


class RecordingSink:
    """Cell sink that records writes instead of drawing them."""

    def __init__(self):
        self.writes: list[CellWrite] = []
        self.flushes = 0

    def write_cell(self, x, y, char, fg=None, bg=None):
        self.writes.append(CellWrite(x, y, char, fg, bg))

    def flush(self):
        self.flushes += 1

    def grid(self) -> dict:
        """Final (x, y) -> char after all writes."""
        return {(w.x, w.y): w.char for w in self.writes}

    def cells(self) -> list:
        return [(w.x, w.y) for w in self.writes]


@pytest.fixture
def sink():
    return RecordingSink()
