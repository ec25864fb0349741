"""StarDate Converter package.

A small desktop utility that turns Earth calendar dates (``YYYY-MM-DD``)
into stardates and shows them in an LCARS styled PySide6 window.  On
hosts without a display it falls back to a line based console loop.
The conversion itself lives in :mod:`stardate_converter.core` and has no
Qt dependency.  Launch with ``python -m stardate_converter``.
"""

from .core.converter import convert, is_valid_date, InvalidDateFormat, StardateResult  # noqa: F401
from .main import main  # noqa: F401

__all__ = ["convert", "is_valid_date", "InvalidDateFormat", "StardateResult", "main"]
