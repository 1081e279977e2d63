"""
Tests for color interpolation between themes.
"""
import logging

import pytest

from PySide6.QtGui import QColor

from codefade.code_token import Cluster, DEFAULT_RENDER_COLOR
from codefade.color_blender import ColorBlender, mix_hsl


class TestMixHsl:
    """Test mix_hsl."""

    def test_progress_zero_is_old_color(self):
        """Test that the start of a transition shows the old color exactly."""
        assert mix_hsl("#123456", "#abcdef", 0.0) == "#123456"

    def test_progress_one_is_new_color(self):
        """Test that the end of a transition shows the new color exactly."""
        assert mix_hsl("#123456", "#abcdef", 1.0) == "#abcdef"

    def test_progress_out_of_range_is_clamped(self):
        """Test that progress outside [0, 1] gives the end colors."""
        assert mix_hsl("#123456", "#abcdef", -0.5) == "#123456"
        assert mix_hsl("#123456", "#abcdef", 1.5) == "#abcdef"

    def test_missing_colors_use_default(self):
        """Test that a missing color is treated as the default render color."""
        assert mix_hsl(None, "#abcdef", 0.0) == DEFAULT_RENDER_COLOR
        assert mix_hsl("#abcdef", None, 1.0) == DEFAULT_RENDER_COLOR

    def test_lightness_midpoint(self):
        """Test that black to white passes through mid grey."""
        color = QColor(mix_hsl("#000000", "#ffffff", 0.5))
        assert color.lightnessF() == pytest.approx(0.5, abs=0.01)
        assert color.hslSaturationF() == pytest.approx(0.0, abs=0.01)

    def test_hue_takes_shorter_path(self):
        """Test that red to magenta goes through pink, not through green and blue."""
        color = QColor(mix_hsl("#ff0000", "#ff00ff", 0.5))
        assert color.hslHueF() == pytest.approx(330 / 360, abs=0.01)

    def test_grey_adopts_other_hue(self):
        """Test that an achromatic color doesn't add a hue of its own."""
        color = QColor(mix_hsl("#808080", "#0000ff", 0.5))
        assert color.hslHueF() == pytest.approx(240 / 360, abs=0.01)
        assert color.blue() > color.red()
        assert color.blue() > color.green()

    def test_result_format(self):
        """Test that mixed colors are lowercase #rrggbb strings."""
        color = mix_hsl("#ff0000", "#00ff00", 0.3)
        assert len(color) == 7
        assert color.startswith("#")
        assert color == color.lower()


class TestColorBlender:
    """Test ColorBlender."""

    def test_no_transition(self):
        """Test that without progress the new clusters come back unchanged."""
        new = [Cluster("a", "#111111")]
        assert ColorBlender().blend(new, [Cluster("a", "#222222")], None) == new

    def test_blend_boundaries(self):
        """Test that progress 0 and 1 give the old and new colors."""
        new = [Cluster("a", "#ff0000"), Cluster(" ", "#00ff00")]
        old = [Cluster("a", "#0000ff"), Cluster(" ", "#ffffff")]
        blender = ColorBlender()
        assert [c.color for c in blender.blend(new, old, 0.0)] == ["#0000ff", "#ffffff"]
        assert [c.color for c in blender.blend(new, old, 1.0)] == ["#ff0000", "#00ff00"]

    def test_text_comes_from_new_stream(self):
        """Test that blended clusters carry the new stream's text."""
        new = [Cluster("ab", "#ff0000")]
        old = [Cluster("ab", "#0000ff")]
        blended = ColorBlender().blend(new, old, 0.5)
        assert [c.text for c in blended] == ["ab"]
        assert blended[0].color not in ("#ff0000", "#0000ff")

    def test_length_mismatch_warns(self, caplog):
        """Test that streams of different length are reported and extra clusters keep the new color."""
        new = [Cluster("a", "#ff0000"), Cluster("b", "#00ff00")]
        old = [Cluster("a", "#0000ff")]
        with caplog.at_level(logging.WARNING, logger="ColorBlender"):
            blended = ColorBlender().blend(new, old, 0.5)

        assert len(blended) == 2
        assert blended[1].color == "#00ff00"
        assert any("Cannot align" in r.getMessage() for r in caplog.records)

    def test_text_mismatch_warns_once(self, caplog):
        """Test that differing segmentation is reported once per blend."""
        new = [Cluster("a", "#ff0000"), Cluster("b", "#ff0000")]
        old = [Cluster("x", "#0000ff"), Cluster("y", "#0000ff")]
        with caplog.at_level(logging.WARNING, logger="ColorBlender"):
            ColorBlender().blend(new, old, 0.5)

        assert len([r for r in caplog.records if "differ" in r.getMessage()]) == 1

    def test_inputs_not_modified(self):
        """Test that blending builds new clusters."""
        new = [Cluster("a", "#ff0000")]
        old = [Cluster("a", "#0000ff")]
        ColorBlender().blend(new, old, 0.5)
        assert new[0].color == "#ff0000"
        assert old[0].color == "#0000ff"
