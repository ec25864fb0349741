"""Console front end for headless environments.

Reads Earth dates line by line and prints the matching stardates.  A
blank line or the end of the input stream ends the session.
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from ..config import CLI_BANNER, CLI_GOODBYE, CLI_INVALID_TEXT, CLI_PROMPT
from .converter import convert

logger = logging.getLogger(__name__)


def _result_line(text: str) -> str:
    result = convert(text)
    if result.ok:
        return f"StarDate: {result.formatted}"
    return CLI_INVALID_TEXT


def run_batch(stdin: TextIO, stdout: TextIO) -> int:
    """Run the interactive conversion loop.

    Parameters
    ----------
    stdin: TextIO
        Stream the dates are read from, one per line.
    stdout: TextIO
        Stream the banner, results and prompts are written to.

    Returns
    -------
    int
        Process exit code, always 0.
    """
    print(CLI_BANNER, file=stdout)
    count = 0
    for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            break
        print(_result_line(line), file=stdout)
        print(file=stdout)
        print(CLI_PROMPT, file=stdout)
        stdout.flush()
        count += 1
    print(CLI_GOODBYE, file=stdout)
    logger.info("Console session finished after %d date(s)", count)
    return 0


def convert_dates(dates: Iterable[str], stdout: TextIO) -> int:
    """Convert dates passed on the command line.

    Returns 0 when every date was valid, 1 otherwise.
    """
    exit_code = 0
    for text in dates:
        line = _result_line(text)
        if line == CLI_INVALID_TEXT:
            exit_code = 1
        print(line, file=stdout)
    return exit_code
