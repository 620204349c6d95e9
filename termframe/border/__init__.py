"""
Layered border engine.

Builds border configurations, computes per-layer geometry, and renders
borders through a cell sink.
"""

from .errors import ConfigurationError
from .glyphs import (
    BorderType,
    Edge,
    Corner,
    GlyphSet,
    DEFAULT_GLYPHS,
    resolve,
    validate_glyph,
)
from .config import BorderConfig
from .builder import BorderBuilder
from .geometry import LayerFrame, LayerGeometry
from .renderer import BorderRenderer, RenderState, render_border

__all__ = [
    # Errors
    "ConfigurationError",
    # Glyphs
    "BorderType",
    "Edge",
    "Corner",
    "GlyphSet",
    "DEFAULT_GLYPHS",
    "resolve",
    "validate_glyph",
    # Config
    "BorderConfig",
    "BorderBuilder",
    # Geometry
    "LayerFrame",
    "LayerGeometry",
    # Rendering
    "BorderRenderer",
    "RenderState",
    "render_border",
]
