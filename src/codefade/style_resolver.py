"""Resolution of class-list labels to theme colors."""

import logging

from codefade.code_theme import CodeTheme


class StyleResolver:
    """
    Looks up the color a theme assigns to a class list.

    The full label is tried first, then each of its space-separated classes in order,
    so "tok-function tok-identifier" falls back to the "tok-identifier" rule.
    """

    def __init__(self, theme: CodeTheme) -> None:
        self._theme = theme
        self._logger = logging.getLogger("StyleResolver")

    @property
    def theme(self) -> CodeTheme:
        """The theme colors are resolved against."""
        return self._theme

    def resolve(self, class_list: str) -> str | None:
        """
        Resolve a class list to a color.

        Args:
            class_list: Class-list label reported by the highlighter

        Returns:
            The color, or None if the theme has no rule for the label.  A warning is
            logged for every unresolved call.
        """
        rules = self._theme.rules
        color = rules.get(class_list)
        if color is not None:
            return color

        for class_name in class_list.split():
            color = rules.get(class_name)
            if color is not None:
                return color

        self._logger.warning("Unknown theme class '%s'", class_list)
        return None
