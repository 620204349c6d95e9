"""
Border rendering.

Validates a BorderConfig, works out every border cell for the current
window size, and sends one cell write per glyph to a CellSink followed by a
single flush.
"""

import logging
from enum import Enum

from ..ui.colors import DEBUG_BACKGROUND
from ..ui.primitives.cells import CellSink
from .config import BorderConfig
from .errors import ConfigurationError
from .geometry import LayerFrame, LayerGeometry
from .glyphs import Edge

logger = logging.getLogger(__name__)

# Order edges are drawn in within a layer; corners follow
EDGE_ORDER = (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM)


class RenderState(Enum):
    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    RENDERING = "rendering"
    DONE = "done"
    REJECTED = "rejected"


class BorderRenderer:
    """
    Draws one BorderConfig.

    The config is only read. Each render() call starts again from
    UNVALIDATED, so the same renderer can redraw after a resize.
    """

    def __init__(self, config: BorderConfig):
        self.config = config
        self.state = RenderState.UNVALIDATED

    def validate(self):
        """Raise ConfigurationError if the config cannot be drawn."""
        config = self.config
        try:
            if config.layer_count == 0:
                raise ConfigurationError("border width cannot be 0")
            if not config.omni_mode:
                missing = config.missing_glyphs()
                if missing:
                    raise ConfigurationError(
                        f"appropriate character not provided for: {', '.join(missing)}"
                    )
        except ConfigurationError as e:
            self._transition(RenderState.REJECTED)
            logger.warning("Border rejected: %s", e)
            raise
        self._transition(RenderState.VALIDATED)

    def _transition(self, state: RenderState):
        logger.debug("Border render state: %s -> %s", self.state.value, state.value)
        self.state = state

    def render(self, window_size: tuple[int, int], sink: CellSink, debug: bool = False) -> int:
        """
        Draw the border for a window of (width, height) cells.

        Args:
            window_size: Terminal size in cells
            sink: Receives the cell writes, flushed once at the end
            debug: Also mark the padding cells with a dark green background

        Returns:
            Number of cells written
        """
        self.state = RenderState.UNVALIDATED
        self.validate()

        if not self.config.visible:
            self._transition(RenderState.DONE)
            return 0

        self._transition(RenderState.RENDERING)
        geometry = LayerGeometry(window_size, self.config.padding)
        written = 0

        if debug:
            for x, y in geometry.padding_cells():
                sink.write_cell(x, y, " ", bg=DEBUG_BACKGROUND)
                written += 1

        if self.config.omni_mode:
            written += self._render_omni(geometry, sink)
        else:
            for frame in geometry.layers(self.config.layer_count):
                written += self._render_layer(frame, sink)

        sink.flush()
        self._transition(RenderState.DONE)
        logger.debug("Rendered border at %dx%d: %d cells", window_size[0], window_size[1], written)
        return written

    def _render_layer(self, frame: LayerFrame, sink: CellSink) -> int:
        config = self.config
        color = config.layer_rgb(frame.layer)
        written = 0
        for edge in EDGE_ORDER:
            glyph = config.edge_glyph(edge, frame.layer)
            for x, y in frame.edge_cells(edge):
                sink.write_cell(x, y, glyph, fg=color)
                written += 1
        for corner, (x, y) in frame.corner_cells().items():
            sink.write_cell(x, y, config.corner_glyph(corner, frame.layer), fg=color)
            written += 1
        return written

    def _render_omni(self, geometry: LayerGeometry, sink: CellSink) -> int:
        # Omni mode only ever draws the outermost frame, in the first layer's color
        frame = geometry.layer(0)
        color = self.config.layer_rgb(0)
        cells = frame.boundary()
        for x, y in cells:
            sink.write_cell(x, y, self.config.omni_char, fg=color)
        return len(cells)


def render_border(config: BorderConfig, window_size: tuple[int, int],
                  sink: CellSink, debug: bool = False) -> int:
    """Validate and draw config in one call."""
    return BorderRenderer(config).render(window_size, sink, debug=debug)
