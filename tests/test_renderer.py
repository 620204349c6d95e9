"""
Tests for BorderRenderer.

Uses the recording sink from conftest so nothing touches the terminal.
"""

import logging

import pytest

from termframe.border import (
    BorderBuilder,
    BorderRenderer,
    BorderType,
    ConfigurationError,
    LayerGeometry,
    RenderState,
    render_border,
)
from termframe.ui.colors import DEBUG_BACKGROUND, to_rgb


class TestLayeredFrames:
    """Multi-layer borders in a window big enough for all layers."""

    def test_each_layer_is_its_own_frame(self, sink):
        config = BorderBuilder().padding(1).width(3).build()
        render_border(config, (20, 10), sink)

        geometry = LayerGeometry((20, 10), padding=1)
        expected = [set(geometry.layer(i).perimeter()) for i in range(3)]
        drawn = set(sink.cells())

        assert drawn == expected[0] | expected[1] | expected[2]
        assert not expected[0] & expected[1]
        assert not expected[1] & expected[2]

    def test_no_cell_written_twice(self, sink):
        config = BorderBuilder().padding(0).width(2).build()
        render_border(config, (12, 8), sink)
        cells = sink.cells()
        assert len(cells) == len(set(cells))

    def test_frames_nested_one_cell_apart(self, sink):
        config = BorderBuilder().padding(2).width(2).build()
        render_border(config, (20, 10), sink)
        grid = sink.grid()
        assert grid[(2, 2)] == "┌"
        assert grid[(3, 3)] == "┌"
        assert grid[(17, 7)] == "┘"
        assert grid[(16, 6)] == "┘"

    def test_returns_cell_count(self, sink):
        config = BorderBuilder().padding(0).build()
        assert render_border(config, (10, 5), sink) == len(sink.writes) == 26

    def test_single_flush(self, sink):
        config = BorderBuilder().width(2).build()
        render_border(config, (20, 10), sink)
        assert sink.flushes == 1


class TestDeterminism:
    """Same config and window, same writes."""

    def test_render_twice_identical(self, sink):
        from conftest import RecordingSink
        config = BorderBuilder().width(2).with_colors(["#FF0BB0", "#6366F1"]).build()
        renderer = BorderRenderer(config)
        other = RecordingSink()
        renderer.render((30, 12), sink)
        renderer.render((30, 12), other)
        assert sink.writes == other.writes


class TestColorResolution:
    """Layer colors: own entry, else last entry, else white."""

    def test_single_color_used_for_every_layer(self, sink):
        config = BorderBuilder().width(3).with_colors(["#FF0BB0"]).build()
        render_border(config, (20, 10), sink)
        assert {w.fg for w in sink.writes} == {to_rgb("#FF0BB0")}

    def test_layer_past_colors_uses_last(self, sink):
        config = BorderBuilder().padding(0).width(3).with_colors(["#FF0000", "#00FF00"]).build()
        render_border(config, (20, 10), sink)
        by_cell = {(w.x, w.y): w.fg for w in sink.writes}
        assert by_cell[(0, 0)] == (255, 0, 0)
        assert by_cell[(1, 1)] == (0, 255, 0)
        assert by_cell[(2, 2)] == (0, 255, 0)

    def test_no_colors_is_white(self, sink):
        render_border(BorderBuilder().build(), (10, 5), sink)
        assert {w.fg for w in sink.writes} == {(255, 255, 255)}


class TestGlyphResolution:
    """Per-layer glyph lookup with last-entry fallback."""

    def test_layer_glyphs(self, sink):
        config = (
            BorderBuilder()
            .padding(0)
            .width(3)
            .horizontal_border_char(["=", "-"])
            .vertical_border_char(["!"])
            .build()
        )
        render_border(config, (20, 10), sink)
        grid = sink.grid()
        assert grid[(5, 0)] == "="
        assert grid[(5, 1)] == "-"
        assert grid[(5, 2)] == "-"
        assert grid[(0, 5)] == "!"
        assert grid[(2, 5)] == "!"

    def test_border_type_glyphs(self, sink):
        config = BorderBuilder().padding(0).border_type(BorderType.DOUBLE).build()
        render_border(config, (10, 5), sink)
        grid = sink.grid()
        assert grid[(0, 0)] == "┌"
        assert grid[(4, 0)] == "═"
        assert grid[(0, 2)] == "║"


class TestCorners:
    """Corners drawn once, never overwritten by edges."""

    def test_single_layer_corners(self, sink):
        config = BorderBuilder().padding(0).width(1).build()
        render_border(config, (10, 5), sink)

        corners = {(0, 0): "┌", (9, 0): "┐", (0, 4): "└", (9, 4): "┘"}
        for cell, glyph in corners.items():
            writes = [w for w in sink.writes if (w.x, w.y) == cell]
            assert len(writes) == 1
            assert writes[0].char == glyph


class TestDegenerate:
    """Windows too small for the border draw nothing and don't fail."""

    @pytest.mark.parametrize("width", [1, 3])
    def test_padding_consumes_window(self, sink, width):
        config = BorderBuilder().padding(2).width(width).build()
        assert render_border(config, (4, 4), sink) == 0
        assert sink.writes == []

    def test_inner_layers_dropped(self, sink):
        config = BorderBuilder().padding(0).width(10).build()
        render_border(config, (10, 6), sink)
        geometry = LayerGeometry((10, 6), padding=0)
        expected = set()
        for frame in geometry.layers(3):
            expected |= set(frame.perimeter())
        assert set(sink.cells()) == expected


class TestOmniMode:
    """A border character draws only the outermost frame."""

    def test_whole_perimeter_in_one_glyph(self, sink):
        config = (
            BorderBuilder()
            .padding(1)
            .width(3)
            .vertical_border_char(["|", "!"])
            .border_char("X")
            .build()
        )
        render_border(config, (10, 6), sink)
        assert {w.char for w in sink.writes} == {"X"}
        assert set(sink.cells()) == set(LayerGeometry((10, 6), padding=1).layer(0).perimeter())
        assert len(sink.writes) == 2 * (8 + 4) - 4

    def test_empty_glyph_lists_ignored(self, sink):
        config = BorderBuilder().vertical_border_char([]).border_char("#").build()
        assert render_border(config, (10, 6), sink) > 0

    def test_uses_first_layer_color(self, sink):
        config = BorderBuilder().border_char("X").with_colors(["#FF0000"]).build()
        render_border(config, (10, 6), sink)
        assert {w.fg for w in sink.writes} == {(255, 0, 0)}

    def test_single_row_window_drawn_end_to_end(self, sink):
        config = BorderBuilder().padding(0).border_char("X").build()
        render_border(config, (10, 1), sink)
        assert sink.cells() == [(x, 0) for x in range(10)]

    def test_single_column_window(self, sink):
        config = BorderBuilder().padding(0).border_char("X").build()
        render_border(config, (1, 4), sink)
        assert sink.cells() == [(0, y) for y in range(4)]

    def test_single_cell_frame(self, sink):
        config = BorderBuilder().padding(1).border_char("X").build()
        render_border(config, (3, 3), sink)
        assert sink.cells() == [(1, 1)]
        assert sink.writes[0].char == "X"

    def test_collapsed_frame_draws_nothing(self, sink):
        config = BorderBuilder().padding(2).border_char("X").build()
        assert render_border(config, (4, 4), sink) == 0


class TestValidation:
    """Configuration errors come before any cell is written."""

    def test_zero_width_rejected(self, sink):
        renderer = BorderRenderer(BorderBuilder().width(0).build())
        with pytest.raises(ConfigurationError, match="border width cannot be 0"):
            renderer.render((20, 10), sink)
        assert sink.writes == []
        assert renderer.state is RenderState.REJECTED

    def test_empty_glyph_list_rejected(self, sink):
        config = BorderBuilder().horizontal_border_char([]).build()
        with pytest.raises(ConfigurationError, match="appropriate character not provided"):
            render_border(config, (20, 10), sink)
        assert sink.writes == []

    def test_rejected_before_debug_markers(self, sink):
        config = BorderBuilder().width(0).build()
        with pytest.raises(ConfigurationError):
            render_border(config, (20, 10), sink, debug=True)
        assert sink.writes == []

    def test_state_done_after_render(self, sink):
        renderer = BorderRenderer(BorderBuilder().build())
        assert renderer.state is RenderState.UNVALIDATED
        renderer.render((10, 5), sink)
        assert renderer.state is RenderState.DONE


class TestVisibility:
    """Invisible borders are a no-op."""

    def test_invisible_draws_nothing(self, sink):
        renderer = BorderRenderer(BorderBuilder().visible(False).width(3).build())
        assert renderer.render((20, 10), sink, debug=True) == 0
        assert sink.writes == []
        assert renderer.state is RenderState.DONE


class TestDebugMarkers:
    """Debug mode paints the padding area."""

    def test_padding_marked(self, sink):
        config = BorderBuilder().padding(1).build()
        render_border(config, (6, 4), sink, debug=True)
        markers = [w for w in sink.writes if w.bg == DEBUG_BACKGROUND]
        assert len(markers) == 6 * 4 - 4 * 2
        assert {w.char for w in markers} == {" "}

    def test_border_still_drawn(self, sink):
        config = BorderBuilder().padding(1).build()
        render_border(config, (6, 4), sink, debug=True)
        assert sink.grid()[(1, 1)] == "┌"

    def test_off_by_default(self, sink):
        render_border(BorderBuilder().padding(1).build(), (6, 4), sink)
        assert all(w.bg is None for w in sink.writes)


class TestIOErrors:
    """Sink failures abort the render and reach the caller."""

    def test_write_error_propagates(self):
        class FailingSink:
            def __init__(self):
                self.count = 0

            def write_cell(self, x, y, char, fg=None, bg=None):
                self.count += 1
                if self.count == 3:
                    raise OSError("terminal went away")

            def flush(self):
                raise AssertionError("flush after failed write")

        failing = FailingSink()
        renderer = BorderRenderer(BorderBuilder().build())
        with pytest.raises(OSError, match="terminal went away"):
            renderer.render((10, 5), failing)
        assert failing.count == 3
        assert renderer.state is RenderState.RENDERING

    def test_flush_error_propagates(self, sink):
        def broken_flush():
            raise OSError("broken pipe")
        sink.flush = broken_flush
        with pytest.raises(OSError, match="broken pipe"):
            render_border(BorderBuilder().build(), (10, 5), sink)


class TestLogging:
    """Render state changes are logged; nothing is printed by default."""

    def test_state_transitions_logged(self, sink, caplog):
        with caplog.at_level(logging.DEBUG, logger="termframe.border.renderer"):
            render_border(BorderBuilder().build(), (10, 5), sink)
        assert "unvalidated -> validated" in caplog.text
        assert "validated -> rendering" in caplog.text
        assert "rendering -> done" in caplog.text

    def test_rejection_logged(self, sink, caplog):
        with caplog.at_level(logging.DEBUG, logger="termframe.border.renderer"):
            with pytest.raises(ConfigurationError):
                render_border(BorderBuilder().width(0).build(), (10, 5), sink)
        assert "unvalidated -> rejected" in caplog.text

    def test_package_logger_has_null_handler(self):
        """Without a configured handler, warnings must not leak onto the drawn screen."""
        handlers = logging.getLogger("termframe").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
