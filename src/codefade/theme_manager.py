"""Theme manager for the built-in light and dark code themes.

Implements a singleton pattern so every code widget shares the same themes.
Emits a signal when the active theme changes so widgets can transition to it.
"""

from enum import Enum, auto
import logging
from typing import Dict, List

from PySide6.QtCore import QObject, Signal, QOperatingSystemVersion
from PySide6.QtGui import QFont, QFontDatabase

from syntax import TokenType, token_class_list

from codefade.code_error import CodeThemeError
from codefade.code_theme import CodeTheme
from codefade.color_role import ColorRole


class ColorMode(Enum):
    """Enumeration for color theme modes."""
    LIGHT = auto()
    DARK = auto()


class ThemeManager(QObject):
    """
    Singleton manager for code themes.

    Builds one theme per ColorMode from the syntax palette, keeps any themes loaded
    from files, and tracks which theme is active.

    Attributes:
        theme_changed (Signal): Emitted with the new CodeTheme when the active theme changes
        _instance (ThemeManager): Singleton instance
    """

    theme_changed = Signal(CodeTheme)
    _instance = None

    def __new__(cls) -> 'ThemeManager':
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super(ThemeManager, cls).__new__(cls)

        return cls._instance

    def __init__(self) -> None:
        """Initialize QObject base class if not already done."""
        if not hasattr(self, '_initialized'):
            super().__init__()
            self._initialized = True
            self._logger = logging.getLogger("ThemeManager")
            self._color_mode = ColorMode.DARK
            self._colors: Dict[ColorRole, Dict[ColorMode, str]] = self._initialize_colors()
            self._highlights: Dict[TokenType, ColorRole] = self._initialize_highlights()
            self._themes: Dict[str, CodeTheme] = {}
            for mode in ColorMode:
                theme = self._create_theme(mode)
                self._themes[theme.name] = theme

            self._active_theme_name = self._mode_theme_name(ColorMode.DARK)
            self._base_font_size: float | None = None
            self._code_font_families = ["Menlo", "Consolas", "Monaco", "monospace"]

    def _initialize_colors(self) -> Dict[ColorRole, Dict[ColorMode, str]]:
        """Initialize the colours for both light and dark modes."""
        return {
            ColorRole.BACKGROUND_PRIMARY: {
                ColorMode.DARK: "#060606",
                ColorMode.LIGHT: "#fcfcfc"
            },
            ColorRole.TEXT_PRIMARY: {
                ColorMode.DARK: "#d8d8d8",
                ColorMode.LIGHT: "#202020"
            },

            # Syntax highlighting
            ColorRole.SYNTAX_ERROR: {
                ColorMode.DARK: "#ff0000",
                ColorMode.LIGHT: "#ff0000"
            },
            ColorRole.SYNTAX_03: {
                ColorMode.DARK: "#68b068",
                ColorMode.LIGHT: "#407040"
            },
            ColorRole.SYNTAX_05: {
                ColorMode.DARK: "#808080",
                ColorMode.LIGHT: "#606060"
            },
            ColorRole.SYNTAX_06: {
                ColorMode.DARK: "#90e0e8",
                ColorMode.LIGHT: "#0080a0"
            },
            ColorRole.SYNTAX_07: {
                ColorMode.DARK: "#e0e080",
                ColorMode.LIGHT: "#a0a000"
            },
            ColorRole.SYNTAX_11: {
                ColorMode.DARK: "#80b0f0",
                ColorMode.LIGHT: "#0060c0"
            },
            ColorRole.SYNTAX_13: {
                ColorMode.DARK: "#ffc0eb",
                ColorMode.LIGHT: "#c080a0"
            },
            ColorRole.SYNTAX_16: {
                ColorMode.DARK: "#88d048",
                ColorMode.LIGHT: "#508020"
            },
            ColorRole.SYNTAX_17: {
                ColorMode.DARK: "#c0c0c0",
                ColorMode.LIGHT: "#404040"
            },
            ColorRole.SYNTAX_19: {
                ColorMode.DARK: "#c87050",
                ColorMode.LIGHT: "#a04020"
            },
            ColorRole.SYNTAX_20: {
                ColorMode.DARK: "#c05040",
                ColorMode.LIGHT: "#803828"
            },
            ColorRole.SYNTAX_21: {
                ColorMode.DARK: "#30c090",
                ColorMode.LIGHT: "#24906c"
            }
        }

    def _initialize_highlights(self) -> Dict[TokenType, ColorRole]:
        """Mapping from token type to colour role."""
        return {
            TokenType.COMMENT: ColorRole.SYNTAX_03,
            TokenType.ELEMENT: ColorRole.SYNTAX_06,
            TokenType.ERROR: ColorRole.SYNTAX_ERROR,
            TokenType.FUNCTION_OR_METHOD: ColorRole.SYNTAX_07,
            TokenType.IDENTIFIER: ColorRole.SYNTAX_11,
            TokenType.JSON_KEY: ColorRole.SYNTAX_07,
            TokenType.KEYWORD: ColorRole.SYNTAX_13,
            TokenType.NUMBER: ColorRole.SYNTAX_16,
            TokenType.OPERATOR: ColorRole.SYNTAX_17,
            TokenType.PREPROCESSOR: ColorRole.SYNTAX_05,
            TokenType.REGEXP: ColorRole.SYNTAX_19,
            TokenType.STRING: ColorRole.SYNTAX_20,
            TokenType.TEXT: ColorRole.SYNTAX_17,
            TokenType.TYPE: ColorRole.SYNTAX_21
        }

    @staticmethod
    def _mode_theme_name(mode: ColorMode) -> str:
        return mode.name.lower()

    def _create_theme(self, mode: ColorMode) -> CodeTheme:
        rules: Dict[str, str] = {}
        for token_type, role in self._highlights.items():
            class_list = token_class_list(token_type)
            if class_list:
                rules[class_list] = self._colors[role][mode]

        return CodeTheme(
            name=self._mode_theme_name(mode),
            rules=rules,
            fallback_color=self._colors[ColorRole.TEXT_PRIMARY][mode]
        )

    def color_mode(self) -> ColorMode:
        """Current color mode."""
        return self._color_mode

    def set_color_mode(self, mode: ColorMode) -> None:
        """
        Set the color mode and make its built-in theme the active theme.

        This also replaces a theme chosen with select_theme(), even if the mode is unchanged.

        Args:
            mode: The ColorMode to switch to
        """
        self._color_mode = mode
        self._set_active(self._mode_theme_name(mode))

    def get_color_str(self, role: ColorRole) -> str:
        """
        Get a color string for a specific role in the current color mode.

        Args:
            role: The ColorRole to look up

        Returns:
            str: The color string (hex format) for the specified role

        Raises:
            KeyError: If no color is defined for the role
        """
        return self._colors[role][self._color_mode]

    def register_theme(self, theme: CodeTheme) -> None:
        """
        Make a theme available by name, replacing any theme with the same name.

        Args:
            theme: The theme to register
        """
        self._themes[theme.name] = theme
        self._logger.info("Registered theme: %s", theme.name)
        if theme.name == self._active_theme_name:
            self.theme_changed.emit(theme)

    def theme_names(self) -> List[str]:
        """Names of every available theme."""
        return sorted(self._themes)

    def get_theme(self, name: str | None = None) -> CodeTheme:
        """
        Get a theme.

        Args:
            name: Theme name, or None for the active theme

        Returns:
            The theme

        Raises:
            CodeThemeError: If there is no theme with that name
        """
        if name is None:
            name = self._active_theme_name

        theme = self._themes.get(name)
        if theme is None:
            raise CodeThemeError("Unknown theme", name)

        return theme

    def select_theme(self, name: str) -> None:
        """
        Make a registered theme the active theme.

        Args:
            name: Theme name

        Raises:
            CodeThemeError: If there is no theme with that name
        """
        if name not in self._themes:
            raise CodeThemeError("Unknown theme", name)

        self._set_active(name)

    def _set_active(self, name: str) -> None:
        if name == self._active_theme_name:
            return

        self._active_theme_name = name
        self.theme_changed.emit(self._themes[name])

    def base_font_size(self) -> float:
        """Base code font size in points."""
        if self._base_font_size is None:
            self._base_font_size = self._determine_base_font_size()

        return self._base_font_size

    def _determine_base_font_size(self) -> float:
        """
        Determine the default system font size based on the operating system.

        Returns:
            Base font size in points.
        """
        system_font = QFontDatabase.systemFont(QFontDatabase.SystemFont.GeneralFont)
        system_size = system_font.pointSizeF()
        if system_size > 0:
            return system_size

        os_type = QOperatingSystemVersion.current()
        if os_type.type() == QOperatingSystemVersion.OSType.MacOS:  # type: ignore
            # macOS typically uses 13pt as default
            return 13

        return 10

    def monospace_font_families(self) -> List[str]:
        """Get the standard monospace font family fallback sequence."""
        return self._code_font_families

    def code_font(self, point_size: float | None = None) -> QFont:
        """
        Create the font code is drawn with.

        Args:
            point_size: Size in points, or None for the base font size

        Returns:
            A fixed pitch font
        """
        font = QFont()
        font.setFamilies(self.monospace_font_families())
        font.setFixedPitch(True)
        font.setPointSizeF(point_size if point_size is not None else self.base_font_size())
        return font
