"""
Tests for the built-in themes and theme selection.
"""
import pytest

from codefade.code_error import CodeThemeError
from codefade.code_theme import CodeTheme
from codefade.color_role import ColorRole
from codefade.theme_manager import ColorMode, ThemeManager


@pytest.fixture
def theme_manager():
    """Provide the theme manager and put the dark theme back afterwards."""
    manager = ThemeManager()
    manager.set_color_mode(ColorMode.DARK)
    yield manager

    manager.set_color_mode(ColorMode.DARK)


class TestThemeManager:
    """Test ThemeManager."""

    def test_singleton(self):
        """Test that there is only one manager."""
        assert ThemeManager() is ThemeManager()

    def test_built_in_themes(self, theme_manager):
        """Test the rules generated from the palette."""
        dark = theme_manager.get_theme("dark")
        assert dark.rules["tok-keyword"] == "#ffc0eb"
        assert dark.rules["tok-function tok-identifier"] == "#e0e080"
        assert dark.fallback_color == "#d8d8d8"

        light = theme_manager.get_theme("light")
        assert light.rules["tok-keyword"] == "#c080a0"
        assert {"dark", "light"} <= set(theme_manager.theme_names())

    def test_active_theme(self, theme_manager):
        """Test that the active theme follows the color mode."""
        assert theme_manager.get_theme().name == "dark"
        assert theme_manager.get_color_str(ColorRole.BACKGROUND_PRIMARY) == "#060606"

    def test_set_color_mode_emits(self, theme_manager):
        """Test that changing color mode announces the new theme."""
        received = []

        def on_theme_changed(theme):
            received.append(theme)

        theme_manager.theme_changed.connect(on_theme_changed)
        try:
            theme_manager.set_color_mode(ColorMode.LIGHT)
            theme_manager.set_color_mode(ColorMode.LIGHT)

        finally:
            theme_manager.theme_changed.disconnect(on_theme_changed)

        assert [theme.name for theme in received] == ["light"]
        assert theme_manager.get_theme().name == "light"

    def test_register_and_select(self, theme_manager):
        """Test selecting a theme loaded from elsewhere."""
        theme = CodeTheme(name="test-registered", rules={"tok-keyword": "#010203"})
        theme_manager.register_theme(theme)
        theme_manager.select_theme("test-registered")
        assert theme_manager.get_theme() is theme

    def test_color_mode_replaces_selected_theme(self, theme_manager):
        """Test that setting the current mode again brings back its built-in theme."""
        theme_manager.register_theme(CodeTheme(name="test-custom"))
        theme_manager.select_theme("test-custom")
        received = []

        def on_theme_changed(theme):
            received.append(theme)

        theme_manager.theme_changed.connect(on_theme_changed)
        try:
            theme_manager.set_color_mode(ColorMode.DARK)

        finally:
            theme_manager.theme_changed.disconnect(on_theme_changed)

        assert theme_manager.get_theme().name == "dark"
        assert [theme.name for theme in received] == ["dark"]

    def test_unknown_theme(self, theme_manager):
        """Test that unknown theme names are errors."""
        with pytest.raises(CodeThemeError):
            theme_manager.get_theme("no-such-theme")

        with pytest.raises(CodeThemeError):
            theme_manager.select_theme("no-such-theme")

    def test_code_font(self, qapp, theme_manager):
        """Test the code font."""
        font = theme_manager.code_font(12)
        assert font.fixedPitch()
        assert font.families() == theme_manager.monospace_font_families()
        assert font.pointSizeF() == 12
        assert theme_manager.base_font_size() > 0
