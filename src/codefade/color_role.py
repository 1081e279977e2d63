"""Color roles used by code rendering."""

from enum import Enum, auto


class ColorRole(Enum):
    """Enumeration of color roles used when rendering code."""
    # Widget colours
    BACKGROUND_PRIMARY = auto()         # Code widget background
    TEXT_PRIMARY = auto()               # Text with no syntax color

    # Syntax highlighting
    SYNTAX_ERROR = auto()               # Red
    SYNTAX_03 = auto()                  # Light green
    SYNTAX_05 = auto()                  # Mid grey
    SYNTAX_06 = auto()                  # Light blue
    SYNTAX_07 = auto()                  # Light yellow
    SYNTAX_11 = auto()                  # Mid blue
    SYNTAX_13 = auto()                  # Light purple
    SYNTAX_16 = auto()                  # Lime green
    SYNTAX_17 = auto()                  # Light grey
    SYNTAX_19 = auto()                  # Mid orange
    SYNTAX_20 = auto()                  # Dark orange
    SYNTAX_21 = auto()                  # Green
