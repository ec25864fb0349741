"""LCARS palette, window geometry and stylesheet loading."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Window and node geometry in pixels
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
PANEL_WIDTH = 300
PANEL_HEIGHT = 100
FRAME_THICKNESS = 6

# LCARS palette
BACKGROUND = "#000000"
ACCENT_ORANGE = "#FF9900"
ACCENT_VIOLET = "#CC99FF"
INPUT_BG = "#282828"
OUTPUT_BG = "#1E1E1E"
LABEL_TEXT = "#000000"

WINDOW_TITLE = "StarDateConverter Interface"

FALLBACK_STYLESHEET = f"""
QWidget#lcarsRoot {{ background-color: {BACKGROUND}; }}
QLabel {{ color: {LABEL_TEXT}; font-family: Arial; font-weight: bold; font-size: 14px; }}
QLabel#panelHeader {{ font-size: 18px; }}
QLineEdit#earthDateField {{
    background-color: {INPUT_BG}; color: {ACCENT_ORANGE};
    border: 2px solid {ACCENT_ORANGE}; font-family: Monospace; font-size: 14px;
}}
QLineEdit#starDateField {{
    background-color: {OUTPUT_BG}; color: {ACCENT_VIOLET};
    border: 2px solid {ACCENT_VIOLET}; font-family: Monospace; font-weight: bold; font-size: 14px;
}}
QPushButton#convertButton {{
    background-color: {BACKGROUND}; color: {ACCENT_ORANGE};
    border: 2px solid {ACCENT_ORANGE}; font-family: Arial; font-weight: bold; font-size: 16px;
}}
QPushButton#convertButton:pressed {{ background-color: {INPUT_BG}; }}
"""


def stylesheet_path() -> str:
    # assets folder is ../assets relative to this file
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "../assets/lcars.qss")


def load_stylesheet() -> str:
    """Return the LCARS QSS from assets, or the built-in fallback if missing."""
    path = stylesheet_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError:
        logger.warning("Stylesheet %s not found, using built-in LCARS theme", path)
        return FALLBACK_STYLESHEET
