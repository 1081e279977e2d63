"""Values that flow through the highlighting pipeline."""

from dataclasses import dataclass


@dataclass
class CharColor:
    """
    Color assigned to a single character of the source text.

    Attributes:
        text: The character
        color: Resolved color as "#rrggbb", or None if unresolved
    """
    text: str
    color: str | None


@dataclass
class Span:
    """
    A maximal run of characters that share a color.

    Attributes:
        text: The characters in the run
        color: Resolved color as "#rrggbb", or None if unresolved
    """
    text: str
    color: str | None


@dataclass
class Cluster:
    """
    A drawable unit: one whitespace grapheme, or a run of non-space graphemes.

    Attributes:
        text: The characters to draw
        color: Resolved color as "#rrggbb", or None if unresolved
    """
    text: str
    color: str | None


# Color used to draw anything that reaches the renderer without a color.
DEFAULT_RENDER_COLOR = "#c9d1d9"
