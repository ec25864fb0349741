"""Application entry point for the StarDate Converter.

This module picks between the PySide6 window and the console loop.
PySide6 is only imported when the window is actually shown so that the
console mode works on headless hosts without a Qt installation.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from .config import LOG_LEVELS, Settings
from .core.batch import convert_dates, run_batch

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr; stdout carries console results."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def is_headless(environ: Optional[Mapping[str, str]] = None, platform: Optional[str] = None) -> bool:
    """Return True if no display is available for a window."""
    env = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform
    if env.get("QT_QPA_PLATFORM", "").lower() == "offscreen":
        return True
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return not (env.get("DISPLAY") or env.get("WAYLAND_DISPLAY"))
    return False


def resolve_mode(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> str:
    """Turn the configured mode into ``gui`` or ``cli``."""
    if settings.mode != "auto":
        return settings.mode
    return "cli" if is_headless(environ) else "gui"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stardate-converter",
        description="Convert Earth dates (YYYY-MM-DD) into stardates.",
    )
    parser.add_argument("dates", nargs="*", help="dates to convert and print, then exit")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--cli", dest="mode", action="store_const", const="cli", help="run the console loop")
    group.add_argument("--gui", dest="mode", action="store_const", const="gui", help="open the LCARS window")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging verbosity (default: $STARDATE_LOG_LEVEL or WARNING)",
    )
    return parser


def run_gui() -> int:
    """Launch the LCARS window and block until it is closed."""
    try:
        from PySide6.QtWidgets import QApplication
    except Exception as exc:  # pragma: no cover - runtime import guard
        raise RuntimeError(
            "PySide6 must be installed to run the StarDate Converter window. "
            "Install it or start with --cli."
        ) from exc

    from .gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, then convert, run the console loop or open the window."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env().override(mode=args.mode, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(settings.log_level)

    if args.dates:
        return convert_dates(args.dates, sys.stdout)

    mode = resolve_mode(settings)
    logger.info("Starting in %s mode", mode)
    if mode == "cli":
        return run_batch(sys.stdin, sys.stdout)
    return run_gui()


if __name__ == "__main__":
    sys.exit(main())
