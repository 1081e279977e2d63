"""
Measuring and drawing cluster streams.

The layout code only needs text widths and a line height, so it is written against
the small TextMeasurer and DrawingSurface interfaces rather than against Qt.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from codefade.code_token import Cluster, DEFAULT_RENDER_COLOR


@dataclass(frozen=True)
class CodeSize:
    """Size of laid out code."""
    width: float
    height: float


class TextMeasurer(ABC):
    """Provides font metrics."""

    @abstractmethod
    def measure_text(self, text: str) -> float:
        """Get the horizontal advance of text."""

    @abstractmethod
    def line_height(self) -> float:
        """Get the distance between consecutive lines."""


class DrawingSurface(TextMeasurer):
    """A surface that can draw colored text."""

    @abstractmethod
    def save(self) -> None:
        """Push the current drawing state."""

    @abstractmethod
    def restore(self) -> None:
        """Pop the drawing state pushed by the matching save()."""

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None:
        """Move the origin."""

    @abstractmethod
    def set_fill_color(self, color: str) -> None:
        """Set the color used by fill_text()."""

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw text with its top-left corner at (x, y)."""


def is_newline(cluster: Cluster) -> bool:
    """True if a cluster is a line break."""
    return cluster.text in ('\n', '\r\n')


def measure_clusters(clusters: Sequence[Cluster], measurer: TextMeasurer) -> CodeSize:
    """
    Work out how much space a cluster stream needs.

    Args:
        clusters: Clusters in text order
        measurer: Font metrics to measure with

    Returns:
        The width of the widest line and the height of all lines; zero size for an
        empty stream
    """
    if not clusters:
        return CodeSize(0.0, 0.0)

    line_height = measurer.line_height()
    height = line_height
    width = 0.0
    line_width = 0.0
    for cluster in clusters:
        if is_newline(cluster):
            width = max(width, line_width)
            line_width = 0.0
            height += line_height
            continue

        line_width += measurer.measure_text(cluster.text)

    return CodeSize(max(width, line_width), height)


def draw_clusters(clusters: Sequence[Cluster], surface: DrawingSurface, size: CodeSize) -> None:
    """
    Draw a cluster stream centered on the surface's origin.

    Args:
        clusters: Clusters in text order
        surface: Surface to draw on
        size: Size of the stream as returned by measure_clusters()
    """
    surface.save()
    surface.translate(-size.width / 2, -size.height / 2)
    line_height = surface.line_height()
    x = 0.0
    y = 0.0
    for cluster in clusters:
        if is_newline(cluster):
            x = 0.0
            y += line_height
            continue

        surface.set_fill_color(cluster.color or DEFAULT_RENDER_COLOR)
        surface.fill_text(cluster.text, x, y)
        x += surface.measure_text(cluster.text)

    surface.restore()
