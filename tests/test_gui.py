"""Offscreen smoke tests for the LCARS window."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from stardate_converter.gui import theme  # noqa: E402
from stardate_converter.gui.main_window import MainWindow  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(app):
    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()


def test_window_layout(window):
    assert window.windowTitle() == "StarDateConverter Interface"
    assert window.width() == theme.WINDOW_WIDTH
    assert window.height() == theme.WINDOW_HEIGHT
    assert window.star_date_field.isReadOnly()
    assert window.convert_button.text() == "Convert to StarDate"


def test_headers_present(window):
    texts = {label.text() for label in window.findChildren(QtWidgets.QLabel)}
    assert {"LCARS INPUT NODE", "LCARS OUTPUT NODE", "Earth Date (YYYY-MM-DD)", "Star Date"} <= texts


def test_convert_button_shows_stardate(window):
    window.earth_date_field.setText(" 2324-01-01 ")
    window.convert_button.click()
    assert window.star_date_field.text() == "1000.00"


def test_invalid_input_shows_message(window):
    window.earth_date_field.setText("2023-02-29")
    window.convert_button.click()
    assert window.star_date_field.text() == "Invalid date format"


def test_return_key_converts(window):
    window.earth_date_field.setText("2323-12-31")
    window.earth_date_field.returnPressed.emit()
    assert window.star_date_field.text() == "997.26"


def test_stylesheet_fallback(monkeypatch, tmp_path):
    monkeypatch.setattr(theme, "stylesheet_path", lambda: str(tmp_path / "missing.qss"))
    assert theme.load_stylesheet() == theme.FALLBACK_STYLESHEET


def test_bundled_stylesheet_loads():
    assert "convertButton" in theme.load_stylesheet()
