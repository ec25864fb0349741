"""Core utilities for the StarDate Converter."""

from .converter import (  # noqa: F401
    InvalidDateFormat,
    StardateResult,
    compute_stardate,
    convert,
    convert_to_text,
    format_stardate,
    is_valid_date,
    parse_earth_date,
)
from .batch import convert_dates, run_batch  # noqa: F401

__all__ = [
    "InvalidDateFormat",
    "StardateResult",
    "compute_stardate",
    "convert",
    "convert_to_text",
    "format_stardate",
    "is_valid_date",
    "parse_earth_date",
    "convert_dates",
    "run_batch",
]
