"""LCARS building blocks: coloured panels and the input/output nodes."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from . import theme


def _paint(frame: QFrame, colour: str) -> None:
    # selector keeps the colour off child widgets
    frame.setStyleSheet(f"QFrame#{frame.objectName()} {{ background-color: {colour}; }}")


def create_lcars_panel(
    parent: QWidget,
    x: int,
    y: int,
    width: int,
    height: int,
    colour: str,
    text: Optional[str] = None,
) -> QFrame:
    """Create an absolutely positioned coloured panel with an optional centred header."""
    panel = QFrame(parent)
    panel.setObjectName("lcarsPanel")
    panel.setGeometry(x, y, width, height)
    _paint(panel, colour)
    if text:
        layout = QVBoxLayout(panel)
        label = QLabel(text)
        label.setObjectName("panelHeader")
        label.setAlignment(Qt.AlignCenter)
        layout.addWidget(label)
    return panel


class InputNode(QFrame):
    """Orange node holding the Earth date field and the convert button."""

    def __init__(self, parent: QWidget, x: int, y: int) -> None:
        super().__init__(parent)
        self.setObjectName("inputNode")
        self.setGeometry(x, y, theme.PANEL_WIDTH, theme.PANEL_HEIGHT)
        _paint(self, theme.ACCENT_ORANGE)

        layout = QGridLayout(self)
        layout.setSpacing(6)
        label = QLabel("Earth Date (YYYY-MM-DD)")
        label.setAlignment(Qt.AlignCenter)
        self.earth_date_field = QLineEdit()
        self.earth_date_field.setObjectName("earthDateField")
        self.earth_date_field.setAlignment(Qt.AlignCenter)
        self.earth_date_field.setPlaceholderText("2364-05-01")
        self.convert_button = QPushButton("Convert to StarDate")
        self.convert_button.setObjectName("convertButton")
        layout.addWidget(label, 0, 0)
        layout.addWidget(self.earth_date_field, 1, 0)
        layout.addWidget(self.convert_button, 2, 0)


class OutputNode(QFrame):
    """Violet node with the read-only stardate field."""

    def __init__(self, parent: QWidget, x: int, y: int) -> None:
        super().__init__(parent)
        self.setObjectName("outputNode")
        self.setGeometry(x, y, theme.PANEL_WIDTH, theme.PANEL_HEIGHT)
        _paint(self, theme.ACCENT_VIOLET)

        layout = QGridLayout(self)
        layout.setSpacing(6)
        label = QLabel("Star Date")
        label.setAlignment(Qt.AlignCenter)
        self.star_date_field = QLineEdit()
        self.star_date_field.setObjectName("starDateField")
        self.star_date_field.setAlignment(Qt.AlignCenter)
        self.star_date_field.setReadOnly(True)
        layout.addWidget(label, 0, 0)
        layout.addWidget(self.star_date_field, 1, 0)
