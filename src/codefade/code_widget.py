"""Widget that draws highlighted code and animates theme changes."""

import logging
import math

from PySide6.QtCore import QSize, QTimer
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from syntax import ProgrammingLanguage

from codefade.code_block import CodeBlock
from codefade.code_settings import CodeSettings
from codefade.code_theme import CodeTheme
from codefade.color_role import ColorRole
from codefade.qt_drawing_surface import QtDrawingSurface, QtTextMeasurer
from codefade.style_transition import TransitioningState
from codefade.theme_manager import ThemeManager


class CodeWidget(QWidget):
    """
    Draws a CodeBlock centered in the widget.

    Theme changes published by the ThemeManager are animated: a timer advances the
    code block's transition roughly sixty times a second until it completes.
    """

    def __init__(self, parent: QWidget | None = None, settings: CodeSettings | None = None) -> None:
        """
        Initialize the widget.

        Args:
            parent: Parent widget
            settings: Rendering settings, None for the defaults
        """
        super().__init__(parent)
        self._logger = logging.getLogger("CodeWidget")
        self._settings = settings if settings is not None else CodeSettings.create_default()

        self._theme_manager = ThemeManager()
        self._theme_manager.theme_changed.connect(self._handle_theme_changed)

        self._code_block = CodeBlock(
            theme=self._theme_manager.get_theme(),
            language=self._settings.language,
            fallback_color=self._settings.fallback_color
        )

        self.setFont(self._theme_manager.code_font(self._settings.font_size))

        self._transition_timer = QTimer(self)
        self._transition_timer.setInterval(16)  # ~60fps
        self._transition_timer.timeout.connect(self._update_transition)

    def code_block(self) -> CodeBlock:
        """The code block being drawn."""
        return self._code_block

    def set_code(self, code: str) -> None:
        """Set the code to draw."""
        self._code_block.set_code(code)
        self._handle_layout_changed()

    def set_language(self, language: ProgrammingLanguage) -> None:
        """Set the language the code is parsed as."""
        self._code_block.set_language(language)
        self._handle_layout_changed()

    def set_dialect(self, dialect: str) -> None:
        """Set the grammar dialect."""
        self._code_block.set_dialect(dialect)
        self._handle_layout_changed()

    def tween_theme(self, theme: CodeTheme) -> None:
        """
        Animate to a new theme using the configured duration and easing.

        Args:
            theme: The theme to transition to
        """
        self._code_block.tween_theme(
            theme,
            self._settings.transition_duration_ms,
            self._settings.easing_function()
        )

        if isinstance(self._code_block.transition_state, TransitioningState):
            self._transition_timer.start()

        else:
            self._transition_timer.stop()

        self.update()

    def _handle_theme_changed(self, theme: CodeTheme) -> None:
        self._logger.debug("Theme changed to %s", theme.name)
        self.tween_theme(theme)

    def _update_transition(self) -> None:
        """Advance the theme transition by one timer interval."""
        if not self._code_block.advance_transition(self._transition_timer.interval()):
            self._transition_timer.stop()

        self.update()

    def _handle_layout_changed(self) -> None:
        self.updateGeometry()
        self.update()

    def sizeHint(self) -> QSize:
        """Size needed to draw the code."""
        size = self._code_block.desired_size(QtTextMeasurer(self.font()))
        return QSize(math.ceil(size.width), math.ceil(size.height))

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    def paintEvent(self, event: QPaintEvent) -> None:
        """Fill the background and draw the code."""
        painter = QPainter(self)
        try:
            painter.fillRect(event.rect(), QColor(self._theme_manager.get_color_str(ColorRole.BACKGROUND_PRIMARY)))
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            painter.setFont(self.font())
            painter.translate(self.width() / 2, self.height() / 2)
            self._code_block.draw(QtDrawingSurface(painter))

        finally:
            painter.end()
