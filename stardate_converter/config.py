"""Constants and runtime settings for the StarDate Converter.

The stardate formula constants are fixed: the epoch year and the number
of stardate units per Earth year are fictional values and are not meant
to be tuned.  Only the way the application starts (window or console)
and how verbosely it logs can be changed, through environment variables
or command line flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Stardate formula
EPOCH_YEAR = 2323
UNITS_PER_YEAR = 1000
DECIMAL_PLACES = 2

# User facing texts
INVALID_DATE_TEXT = "Invalid date format"
CLI_INVALID_TEXT = "Invalid date format. Use YYYY-MM-DD."
CLI_BANNER = "Running in headless mode (CLI). Enter Earth date (YYYY-MM-DD) or blank to exit:"
CLI_PROMPT = "Enter another date or blank to exit:"
CLI_GOODBYE = "Exiting."

MODES = ("auto", "gui", "cli")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_MODE = "STARDATE_MODE"
ENV_LOG_LEVEL = "STARDATE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """How the application should start."""

    mode: str = "auto"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode '{self.mode}', expected one of {', '.join(MODES)}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}', expected one of {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``STARDATE_MODE`` and ``STARDATE_LOG_LEVEL``."""
        env = os.environ if environ is None else environ
        mode = env.get(ENV_MODE, "auto").strip().lower() or "auto"
        log_level = env.get(ENV_LOG_LEVEL, "WARNING").strip().upper() or "WARNING"
        return cls(mode=mode, log_level=log_level)

    def override(self, mode: Optional[str] = None, log_level: Optional[str] = None) -> "Settings":
        """Return a copy with command line values taking precedence."""
        return Settings(
            mode=mode or self.mode,
            log_level=log_level.upper() if log_level else self.log_level,
        )
