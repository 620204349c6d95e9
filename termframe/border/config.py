"""
Finished border configuration.

A BorderConfig is produced by BorderBuilder.build() and never changes
afterwards; the window size is supplied fresh on every render.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..ui.colors import RGB, WHITE, HexColor
from .glyphs import BorderType, Corner, Edge, resolve


@dataclass(frozen=True)
class BorderConfig:
    """An immutable description of a (possibly multi-layer) border."""
    visible: bool = True
    padding: int = 1
    layer_count: int = 1
    border_type: BorderType = BorderType.SOLID
    omni_char: Optional[str] = None
    edge_glyphs: Mapping[Edge, tuple[str, ...]] = field(default_factory=dict)
    corner_glyphs: Mapping[Corner, tuple[str, ...]] = field(default_factory=dict)
    colors: tuple[HexColor, ...] = ()

    def __post_init__(self):
        # Freeze the glyph mappings so the config can't be changed through them
        object.__setattr__(self, "edge_glyphs", MappingProxyType(
            {edge: tuple(glyphs) for edge, glyphs in self.edge_glyphs.items()}
        ))
        object.__setattr__(self, "corner_glyphs", MappingProxyType(
            {corner: tuple(glyphs) for corner, glyphs in self.corner_glyphs.items()}
        ))
        object.__setattr__(self, "colors", tuple(self.colors))

    @property
    def omni_mode(self) -> bool:
        return self.omni_char is not None

    def edge_glyph(self, edge: Edge, layer: int) -> str:
        return resolve(self.edge_glyphs.get(edge, ()), layer, "")

    def corner_glyph(self, corner: Corner, layer: int) -> str:
        return resolve(self.corner_glyphs.get(corner, ()), layer, "")

    def layer_color(self, layer: int) -> HexColor:
        return resolve(self.colors, layer, WHITE)

    def layer_rgb(self, layer: int) -> RGB:
        return self.layer_color(layer).to_rgb()

    def missing_glyphs(self) -> list[str]:
        """Names of the edge/corner glyph lists that are empty."""
        missing = [e.value for e in Edge if not self.edge_glyphs.get(e)]
        missing += [c.value for c in Corner if not self.corner_glyphs.get(c)]
        return missing
