"""Syntax color themes."""

from dataclasses import dataclass, field
import json
from typing import Any, Dict, Mapping

from PySide6.QtGui import QColor

from codefade.code_error import CodeThemeError


def normalize_color(value: str) -> str | None:
    """
    Convert any color Qt understands into "#rrggbb" form.

    Args:
        value: Color name or hex string

    Returns:
        The normalized color, or None if Qt can't parse it
    """
    color = QColor(value)
    if not color.isValid():
        return None

    return color.name()


@dataclass(frozen=True)
class CodeTheme:
    """
    A syntax color theme: a mapping from class-list labels to colors plus a fallback color.

    Attributes:
        name: Display name of the theme
        rules: Class-list label (for example "tok-keyword") to "#rrggbb" color
        fallback_color: Color for characters no rule colors
    """
    name: str
    rules: Mapping[str, str] = field(default_factory=dict)
    fallback_color: str = "#ff0000"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodeTheme":
        """
        Build a theme from its JSON form.

        Args:
            data: Dictionary with "name", optional "fallbackColor" and "rules"

        Returns:
            The theme, with every color normalized to "#rrggbb"

        Raises:
            CodeThemeError: If the name is missing or any color is invalid
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise CodeThemeError("Theme has no name")

        fallback = normalize_color(str(data.get("fallbackColor", "#ff0000")))
        if fallback is None:
            raise CodeThemeError(f"Invalid fallback color {data.get('fallbackColor')!r}", name)

        raw_rules = data.get("rules", {})
        if not isinstance(raw_rules, dict):
            raise CodeThemeError("Theme rules must be an object", name)

        rules: Dict[str, str] = {}
        for label, value in raw_rules.items():
            color = normalize_color(str(value))
            if color is None:
                raise CodeThemeError(f"Invalid color {value!r}", name, label)

            rules[label] = color

        return cls(name=name, rules=rules, fallback_color=fallback)

    @classmethod
    def load(cls, path: str) -> "CodeTheme":
        """
        Load a theme from a JSON file.

        Args:
            path: Path to the theme file

        Returns:
            The loaded theme

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            CodeThemeError: If the theme definition is invalid
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise CodeThemeError(f"Theme file {path} does not contain an object")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the theme to its JSON form."""
        return {
            "name": self.name,
            "fallbackColor": self.fallback_color,
            "rules": dict(self.rules)
        }

    def save(self, path: str) -> None:
        """
        Save the theme to a JSON file.

        Args:
            path: Path to the theme file
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
