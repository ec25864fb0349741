"""Main application window for the StarDate Converter.

This module defines the ``MainWindow`` class which lays out the LCARS
screen: a black fixed size canvas framed by orange strips, two accent
columns, the input and output node headers and the two nodes
themselves.  Widgets are positioned absolutely; panels created later
are drawn on top of earlier ones.  The window only moves text between
the widgets and ``convert_to_text``; it never does date arithmetic.
"""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QWidget

from ..core.converter import convert_to_text
from . import theme
from .panels import InputNode, OutputNode, create_lcars_panel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top level LCARS window converting Earth dates to stardates."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(theme.WINDOW_TITLE)
        self._init_ui()
        self.setStyleSheet(theme.load_stylesheet())
        self.setFixedSize(theme.WINDOW_WIDTH, theme.WINDOW_HEIGHT)

    def _init_ui(self) -> None:
        """Construct the frame, accents, headers and nodes."""
        width, height = theme.WINDOW_WIDTH, theme.WINDOW_HEIGHT
        edge = theme.FRAME_THICKNESS
        orange, violet = theme.ACCENT_ORANGE, theme.ACCENT_VIOLET

        root = QWidget()
        root.setObjectName("lcarsRoot")
        root.setFixedSize(width, height)
        self.setCentralWidget(root)

        # Frame strips: top, bottom, left, right
        create_lcars_panel(root, 0, 0, width, edge, orange)
        create_lcars_panel(root, 0, height - edge, width, edge, orange)
        create_lcars_panel(root, 0, 0, edge, height, orange)
        create_lcars_panel(root, width - edge, 0, edge, height, orange)
        # Accent columns under each node
        create_lcars_panel(root, 50, 150, 12, 420, orange)
        create_lcars_panel(root, 400, 150, 12, 420, violet)
        # Node headers
        create_lcars_panel(root, 50, 50, theme.PANEL_WIDTH, theme.PANEL_HEIGHT, orange, "LCARS INPUT NODE")
        create_lcars_panel(root, 400, 50, theme.PANEL_WIDTH, theme.PANEL_HEIGHT, violet, "LCARS OUTPUT NODE")

        self.input_node = InputNode(root, 50, 200)
        self.output_node = OutputNode(root, 400, 200)
        self.earth_date_field = self.input_node.earth_date_field
        self.star_date_field = self.output_node.star_date_field
        self.convert_button = self.input_node.convert_button

        self.convert_button.clicked.connect(self.convert_input)  # type: ignore[arg-type]
        self.earth_date_field.returnPressed.connect(self.convert_input)  # type: ignore[arg-type]

    def convert_input(self) -> None:
        """Convert the entered Earth date and show the result."""
        text = convert_to_text(self.earth_date_field.text())
        logger.debug("Displaying %r", text)
        self.star_date_field.setText(text)
