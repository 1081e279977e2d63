"""Qt implementations of the layout interfaces."""

from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter

from codefade.code_layout import DrawingSurface, TextMeasurer


class QtTextMeasurer(TextMeasurer):
    """Font metrics for a QFont, for sizing without a painter."""

    def __init__(self, font: QFont) -> None:
        self._metrics = QFontMetricsF(font)

    def measure_text(self, text: str) -> float:
        return self._metrics.horizontalAdvance(text)

    def line_height(self) -> float:
        return self._metrics.lineSpacing()


class QtDrawingSurface(DrawingSurface):
    """
    Draws through a QPainter using the painter's current font.

    Text positions are top-left corners; the font ascent is added when drawing since
    QPainter positions text by its baseline.
    """

    def __init__(self, painter: QPainter) -> None:
        self._painter = painter
        self._metrics = QFontMetricsF(painter.font())

    def measure_text(self, text: str) -> float:
        return self._metrics.horizontalAdvance(text)

    def line_height(self) -> float:
        return self._metrics.lineSpacing()

    def save(self) -> None:
        self._painter.save()

    def restore(self) -> None:
        self._painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._painter.translate(dx, dy)

    def set_fill_color(self, color: str) -> None:
        self._painter.setPen(QColor(color))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._painter.drawText(QPointF(x, y + self._metrics.ascent()), text)
