"""Viewer that shows a source file and cross-fades between themes when clicked."""

from datetime import datetime, timezone
import logging
from logging.handlers import RotatingFileHandler
import os
import sys

from PySide6.QtCore import QSize
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication

from syntax import ProgrammingLanguageUtils

from codefade.code_settings import CodeSettings
from codefade.code_widget import CodeWidget
from codefade.theme_manager import ColorMode, ThemeManager


SETTINGS_PATH = os.path.expanduser("~/.codefade/settings.json")


def setup_logging() -> None:
    """Configure logging to a timestamped, size-limited file."""
    log_dir = os.path.expanduser("~/.codefade/logs")
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    handler = RotatingFileHandler(
        os.path.join(log_dir, f"{timestamp}.log"),
        maxBytes=1024*1024,  # 1MB
        backupCount=9,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )


class ViewerWidget(CodeWidget):
    """Code widget that toggles between the light and dark themes on each click."""

    def mousePressEvent(self, event: QMouseEvent) -> None:
        manager = ThemeManager()
        mode = ColorMode.LIGHT if manager.color_mode() == ColorMode.DARK else ColorMode.DARK
        manager.set_color_mode(mode)
        event.accept()


def main() -> int:
    """Show the file named on the command line."""
    setup_logging()
    logger = logging.getLogger("codefade")

    settings = CodeSettings.create_default()
    if os.path.exists(SETTINGS_PATH):
        try:
            settings = CodeSettings.load(SETTINGS_PATH)

        except (OSError, ValueError):
            logger.exception("Failed to load settings from %s", SETTINGS_PATH)

    app = QApplication(sys.argv)
    ThemeManager().set_color_mode(settings.theme)
    widget = ViewerWidget(settings=settings)
    if len(sys.argv) > 1:
        path = sys.argv[1]
        with open(path, 'r', encoding='utf-8') as f:
            widget.set_language(ProgrammingLanguageUtils.from_file_extension(path))
            widget.set_code(f.read())

    widget.setWindowTitle("codefade")
    widget.resize(widget.sizeHint() + QSize(40, 40))
    widget.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
