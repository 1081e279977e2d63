"""Shared fixtures for the test suite."""

import os

# Qt must not try to open a display while the tests run.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PySide6.QtWidgets import QApplication

from codefade.code_theme import CodeTheme


@pytest.fixture(scope="session")
def qapp():
    """Provide the QApplication needed by fonts, painting and widgets."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture
def simple_theme():
    """A small theme with distinct colors for a few classes."""
    return CodeTheme(
        name="simple",
        rules={
            "tok-keyword": "#ff0000",
            "tok-string": "#00ff00",
            "tok-identifier": "#0000ff",
            "tok-number": "#ffff00",
        },
        fallback_color="#c9d1d9"
    )


@pytest.fixture
def other_theme():
    """A second theme with the same classes in different colors."""
    return CodeTheme(
        name="other",
        rules={
            "tok-keyword": "#000080",
            "tok-string": "#800000",
            "tok-identifier": "#008000",
            "tok-number": "#808000",
        },
        fallback_color="#202020"
    )
