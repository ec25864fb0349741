"""Conversion of Earth calendar dates into stardates.

A stardate counts ``UNITS_PER_YEAR`` units per Earth year starting at
``EPOCH_YEAR``.  The fractional part places the date proportionally
through its year, so January 1st always lands on a whole thousand:

.. code-block:: text

    stardate = 1000 * (year - 2323) + 1000 * (day_of_year - 1) / days_in_year

Input must be a ``YYYY-MM-DD`` string (surrounding whitespace is
ignored).  ``convert`` never raises; it returns a ``StardateResult``
which either carries the value or an ``InvalidDateFormat`` indicator.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..config import DECIMAL_PLACES, EPOCH_YEAR, INVALID_DATE_TEXT, UNITS_PER_YEAR

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class InvalidDateFormat(ValueError):
    """The input could not be read as a ``YYYY-MM-DD`` calendar date."""

    def __init__(self, text: Any) -> None:
        super().__init__(f"Invalid date format: {text!r} (expected YYYY-MM-DD)")
        self.text = text


@dataclass(frozen=True)
class StardateResult:
    """Outcome of a conversion: a stardate or an ``InvalidDateFormat``."""

    source: str
    stardate: Optional[float] = None
    error: Optional[InvalidDateFormat] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def formatted(self) -> Optional[str]:
        if self.stardate is None:
            return None
        return format_stardate(self.stardate)

    @property
    def display_text(self) -> str:
        """Formatted stardate, or the failure text shown to users."""
        return self.formatted if self.ok else INVALID_DATE_TEXT


def parse_earth_date(text: Any) -> date:
    """Parse ``text`` as a ``YYYY-MM-DD`` date.

    Raises
    ------
    InvalidDateFormat
        If ``text`` is not a string, does not match the pattern or names
        a day that does not exist (e.g. ``2023-02-29``).
    """
    if not isinstance(text, str):
        raise InvalidDateFormat(text)
    match = _DATE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidDateFormat(text)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormat(text) from exc


def is_valid_date(text: Any) -> bool:
    """Return True if ``text`` parses as a calendar date."""
    try:
        parse_earth_date(text)
    except InvalidDateFormat:
        return False
    return True


def compute_stardate(earth_date: date) -> float:
    """Compute the stardate for a calendar date."""
    year_offset = earth_date.year - EPOCH_YEAR
    day_of_year = earth_date.timetuple().tm_yday
    days_in_year = 366 if calendar.isleap(earth_date.year) else 365
    return UNITS_PER_YEAR * year_offset + UNITS_PER_YEAR * (day_of_year - 1) / days_in_year


def format_stardate(value: float) -> str:
    return f"{value:.{DECIMAL_PLACES}f}"


def convert(text: Any) -> StardateResult:
    """Convert an Earth date string to a stardate without raising."""
    source = text.strip() if isinstance(text, str) else repr(text)
    try:
        earth_date = parse_earth_date(text)
    except InvalidDateFormat as exc:
        logger.debug("Rejected date input %r", text)
        return StardateResult(source=source, error=exc)
    value = compute_stardate(earth_date)
    logger.debug("Converted %s to stardate %s", earth_date.isoformat(), format_stardate(value))
    return StardateResult(source=source, stardate=value)


def convert_to_text(text: Any) -> str:
    """Text shown by presentation layers for ``text``."""
    return convert(text).display_text
