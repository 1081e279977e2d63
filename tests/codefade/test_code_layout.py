"""
Tests for measuring and drawing cluster streams.
"""
from codefade.code_layout import CodeSize, DrawingSurface, TextMeasurer, draw_clusters, measure_clusters
from codefade.code_token import Cluster, DEFAULT_RENDER_COLOR


class FixedMeasurer(TextMeasurer):
    """Every character is 10 wide and lines are 20 high."""

    def measure_text(self, text):
        return 10.0 * len(text)

    def line_height(self):
        return 20.0


class RecordingSurface(FixedMeasurer, DrawingSurface):
    """Records drawing calls."""

    def __init__(self):
        self.calls = []

    def save(self):
        self.calls.append(("save",))

    def restore(self):
        self.calls.append(("restore",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def set_fill_color(self, color):
        self.calls.append(("color", color))

    def fill_text(self, text, x, y):
        self.calls.append(("text", text, x, y))


class TestMeasureClusters:
    """Test measure_clusters."""

    def test_empty(self):
        """Test that nothing to draw takes no space."""
        assert measure_clusters([], FixedMeasurer()) == CodeSize(0.0, 0.0)

    def test_single_line(self):
        """Test a stream without line breaks."""
        clusters = [Cluster("let", None), Cluster(" ", None), Cluster("x", None)]
        assert measure_clusters(clusters, FixedMeasurer()) == CodeSize(50.0, 20.0)

    def test_widest_line(self):
        """Test that width is the widest line, including the last one."""
        clusters = [Cluster("ab", None), Cluster("\n", None), Cluster("abcd", None)]
        assert measure_clusters(clusters, FixedMeasurer()) == CodeSize(40.0, 40.0)

    def test_trailing_newline(self):
        """Test that a trailing line break adds an empty line."""
        clusters = [Cluster("abc", None), Cluster("\n", None)]
        assert measure_clusters(clusters, FixedMeasurer()) == CodeSize(30.0, 40.0)


class TestDrawClusters:
    """Test draw_clusters."""

    def test_draw_positions_and_colors(self):
        """Test that clusters are drawn left to right and line by line, centered on the origin."""
        clusters = [
            Cluster("ab", "#111111"),
            Cluster(" ", None),
            Cluster("\n", "#222222"),
            Cluster("c", "#333333"),
        ]
        surface = RecordingSurface()
        size = measure_clusters(clusters, surface)
        draw_clusters(clusters, surface, size)

        assert surface.calls == [
            ("save",),
            ("translate", -15.0, -20.0),
            ("color", "#111111"),
            ("text", "ab", 0.0, 0.0),
            ("color", DEFAULT_RENDER_COLOR),
            ("text", " ", 20.0, 0.0),
            ("color", "#333333"),
            ("text", "c", 0.0, 20.0),
            ("restore",),
        ]

    def test_draw_empty(self):
        """Test that an empty stream only saves and restores."""
        surface = RecordingSurface()
        draw_clusters([], surface, CodeSize(0.0, 0.0))
        assert surface.calls == [("save",), ("translate", -0.0, -0.0), ("restore",)]

    def test_crlf_cluster_is_a_line_break(self):
        """Test that a CR LF cluster starts a new line and takes no width."""
        clusters = [Cluster("abc", None), Cluster("\r\n", None), Cluster("d", None)]
        assert measure_clusters(clusters, FixedMeasurer()) == CodeSize(30.0, 40.0)

        surface = RecordingSurface()
        draw_clusters(clusters, surface, measure_clusters(clusters, surface))
        drawn = [call[1] for call in surface.calls if call[0] == "text"]
        assert drawn == ["abc", "d"]
