"""Conversion of highlighter callbacks into one color per character."""

import logging
from typing import Callable, List

from codefade.code_token import CharColor
from codefade.style_resolver import StyleResolver


HighlightCallback = Callable[[int, int, str], None]
HighlightWalk = Callable[[HighlightCallback], None]


class TokenBuilder:
    """
    Builds a dense list of per-character colors from classified ranges.

    Ranges are applied in the order the highlighter reports them, so when ranges
    overlap the last one reported wins.  Characters no range covers keep the
    fallback color.
    """

    def __init__(self, text: str, fallback_color: str, resolver: StyleResolver) -> None:
        """
        Initialize the builder.

        Args:
            text: The normalized source text
            fallback_color: Color for characters no range colors
            resolver: Resolves class lists to colors
        """
        self._text = text
        self._fallback_color = fallback_color
        self._resolver = resolver
        self._chars: List[CharColor] = []
        self._logger = logging.getLogger("TokenBuilder")

    def _extend_to(self, end: int) -> None:
        """Add fallback-colored entries for every index below end that doesn't have one yet."""
        end = min(end, len(self._text))
        while len(self._chars) < end:
            index = len(self._chars)
            self._chars.append(CharColor(text=self._text[index], color=self._fallback_color))

    def add_range(self, start: int, end: int, class_list: str) -> None:
        """
        Apply one classified range.

        Args:
            start: First character index of the range
            end: Index one past the last character of the range
            class_list: Class-list label the highlighter assigned to the range
        """
        color = self._resolver.resolve(class_list)
        self._extend_to(end)
        if color is None:
            return

        for i in range(max(start, 0), min(end, len(self._chars))):
            self._chars[i].color = color

    def build(self, walk: HighlightWalk) -> List[CharColor]:
        """
        Run the highlighter and return the per-character colors.

        Args:
            walk: Drives the highlighter, calling its argument once per classified range

        Returns:
            One CharColor per character of the text
        """
        self._chars = []
        walk(self.add_range)

        # Anything after the last reported range still needs a color.
        self._extend_to(len(self._text))
        self._logger.debug("Built %d character colors", len(self._chars))
        return self._chars
