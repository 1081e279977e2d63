"""Settings for rendering and animating code."""

from dataclasses import dataclass
import json
import logging

from PySide6.QtCore import QEasingCurve

from syntax import ProgrammingLanguage, ProgrammingLanguageUtils

from codefade.code_theme import normalize_color
from codefade.style_transition import EasingFunction, easing_curve
from codefade.theme_manager import ColorMode


@dataclass
class CodeSettings:
    """
    Code rendering settings.

    Attributes:
        theme: Color mode whose built-in theme is used
        language: Default language for new code blocks
        transition_duration_ms: Length of a theme transition
        easing: Name of the QEasingCurve type used for theme transitions
        font_size: Code font size in points, None for the system default
        fallback_color: Color for unclassified characters, None to use the theme's
    """
    theme: ColorMode = ColorMode.DARK
    language: ProgrammingLanguage = ProgrammingLanguage.JAVASCRIPT
    transition_duration_ms: int = 600
    easing: str = "InOutCubic"
    font_size: float | None = None
    fallback_color: str | None = None

    @classmethod
    def create_default(cls) -> "CodeSettings":
        """Create a new CodeSettings object with default values."""
        return cls(
            theme=ColorMode.DARK,
            language=ProgrammingLanguage.JAVASCRIPT,
            transition_duration_ms=600,
            easing="InOutCubic",
            font_size=None,
            fallback_color=None
        )

    @classmethod
    def load(cls, path: str) -> "CodeSettings":
        """
        Load settings from file.

        Values that are missing or not recognised keep their defaults.

        Args:
            path: Path to the settings file

        Returns:
            CodeSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
        """
        logger = logging.getLogger("CodeSettings")
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            theme_str = data.get("theme", "DARK")
            try:
                settings.theme = ColorMode[str(theme_str)]

            except (KeyError, ValueError):
                logger.warning("Unknown theme '%s', using DARK", theme_str)
                settings.theme = ColorMode.DARK

            language = ProgrammingLanguageUtils.from_name(str(data.get("language", "javascript")))
            if language != ProgrammingLanguage.UNKNOWN:
                settings.language = language

            duration = data.get("transitionDurationMs", settings.transition_duration_ms)
            if isinstance(duration, (int, float)) and duration >= 0:
                settings.transition_duration_ms = int(duration)

            easing = data.get("easing", settings.easing)
            if isinstance(easing, str) and easing in QEasingCurve.Type.__members__:
                settings.easing = easing

            else:
                logger.warning("Unknown easing curve '%s', using %s", easing, settings.easing)

            font_size = data.get("fontSize", None)
            if isinstance(font_size, (int, float)) and font_size > 0:
                settings.font_size = float(font_size)

            fallback_color = data.get("fallbackColor", None)
            if fallback_color is not None:
                settings.fallback_color = normalize_color(fallback_color) if isinstance(fallback_color, str) else None
                if settings.fallback_color is None:
                    logger.warning("Invalid fallback color %r, using the theme's", fallback_color)

        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to the settings file
        """
        data = {
            "theme": self.theme.name,
            "language": ProgrammingLanguageUtils.get_name(self.language),
            "transitionDurationMs": self.transition_duration_ms,
            "easing": self.easing,
            "fontSize": self.font_size,
            "fallbackColor": self.fallback_color
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)

    def easing_function(self) -> EasingFunction:
        """The timing curve named by the easing setting."""
        return easing_curve(self.easing)
