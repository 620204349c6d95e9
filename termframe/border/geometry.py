"""
Layer geometry for concentric borders.

Layer 0 sits `padding` cells in from the window edge; each further layer
sits one cell further in. Edge runs stop one cell short of the corners on
both ends, so no cell of a layer is drawn twice and layers never share cells.
"""

from dataclasses import dataclass
from typing import Iterator

from .glyphs import Corner, Edge

Cell = tuple[int, int]


@dataclass(frozen=True)
class LayerFrame:
    """Coordinates of one border layer. Inclusive on all four sides."""
    layer: int
    left_x: int
    right_x: int
    top_y: int
    bottom_y: int

    @property
    def collapsed(self) -> bool:
        """True when padding and depth have used up the window on either axis."""
        return self.left_x > self.right_x or self.top_y > self.bottom_y

    @property
    def vertical_run(self) -> range:
        """Rows covered by the left and right edges (strictly between corners)."""
        return range(self.top_y + 1, self.bottom_y)

    @property
    def horizontal_run(self) -> range:
        """Columns covered by the top and bottom edges (strictly between corners)."""
        return range(self.left_x + 1, self.right_x)

    def edge_cells(self, edge: Edge) -> list[Cell]:
        """Cells of one edge, empty when that edge has degenerated."""
        if self.collapsed:
            return []
        if edge is Edge.LEFT:
            return [(self.left_x, y) for y in self.vertical_run]
        if edge is Edge.RIGHT:
            if self.right_x == self.left_x:
                return []
            return [(self.right_x, y) for y in self.vertical_run]
        if edge is Edge.TOP:
            return [(x, self.top_y) for x in self.horizontal_run]
        if self.bottom_y == self.top_y:
            return []
        return [(x, self.bottom_y) for x in self.horizontal_run]

    def corner_cells(self) -> dict[Corner, Cell]:
        """Corner positions; empty unless the frame spans at least 2x2 cells."""
        if self.left_x >= self.right_x or self.top_y >= self.bottom_y:
            return {}
        return {
            Corner.TOP_LEFT: (self.left_x, self.top_y),
            Corner.TOP_RIGHT: (self.right_x, self.top_y),
            Corner.BOTTOM_LEFT: (self.left_x, self.bottom_y),
            Corner.BOTTOM_RIGHT: (self.right_x, self.bottom_y),
        }

    def perimeter(self) -> list[Cell]:
        """Every cell of this layer: left, right, top, bottom edges, then corners."""
        cells = []
        for edge in (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM):
            cells.extend(self.edge_cells(edge))
        cells.extend(self.corner_cells().values())
        return cells

    def boundary(self) -> list[Cell]:
        """
        Every cell on the rectangle's outline, row by row, each once.

        Unlike perimeter() this keeps the end cells of frames only one row or
        column thick, down to a single cell.
        """
        if self.collapsed:
            return []
        return [
            (x, y)
            for y in range(self.top_y, self.bottom_y + 1)
            for x in range(self.left_x, self.right_x + 1)
            if x in (self.left_x, self.right_x) or y in (self.top_y, self.bottom_y)
        ]


class LayerGeometry:
    """Computes layer frames for a window size and padding."""

    def __init__(self, window_size: tuple[int, int], padding: int):
        self.width, self.height = window_size
        self.padding = padding

    def layer(self, index: int) -> LayerFrame:
        return LayerFrame(
            layer=index,
            left_x=self.padding + index,
            right_x=self.width - self.padding - 1 - index,
            top_y=self.padding + index,
            bottom_y=self.height - self.padding - 1 - index,
        )

    def layers(self, count: int) -> Iterator[LayerFrame]:
        """
        Yield frames for layers 0..count-1, outermost first.

        Stops at the first collapsed layer: every deeper layer is smaller
        still, so it would collapse too.
        """
        for index in range(count):
            frame = self.layer(index)
            if frame.collapsed:
                return
            yield frame

    def in_padding(self, x: int, y: int) -> bool:
        """True for cells between the window edge and the outermost layer."""
        return (
            x < self.padding
            or x >= self.width - self.padding
            or y < self.padding
            or y >= self.height - self.padding
        )

    def padding_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if self.in_padding(x, y):
                    yield (x, y)
