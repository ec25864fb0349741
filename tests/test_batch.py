"""Tests for the console conversion loop."""

import io

from stardate_converter.core.batch import convert_dates, run_batch

BANNER = "Running in headless mode (CLI). Enter Earth date (YYYY-MM-DD) or blank to exit:"
PROMPT = "Enter another date or blank to exit:"


def _run(text):
    stdout = io.StringIO()
    code = run_batch(io.StringIO(text), stdout)
    return code, stdout.getvalue().splitlines()


def test_valid_and_invalid_lines():
    code, lines = _run("2323-01-01\nnot-a-date\n")
    assert code == 0
    assert lines == [
        BANNER,
        "StarDate: 0.00",
        "",
        PROMPT,
        "Invalid date format. Use YYYY-MM-DD.",
        "",
        PROMPT,
        "Exiting.",
    ]


def test_blank_line_ends_session():
    code, lines = _run("2324-01-01\n\n2323-01-01\n")
    assert code == 0
    assert "StarDate: 1000.00" in lines
    assert "StarDate: 0.00" not in lines
    assert lines[-1] == "Exiting."


def test_whitespace_only_line_ends_session():
    _, lines = _run("   \n2323-01-01\n")
    assert lines == [BANNER, "Exiting."]


def test_end_of_input_without_newline():
    code, lines = _run("  2323-12-31  ")
    assert code == 0
    assert lines[1] == "StarDate: 997.26"
    assert lines[-1] == "Exiting."


def test_empty_input():
    code, lines = _run("")
    assert code == 0
    assert lines == [BANNER, "Exiting."]


def test_cli_uses_two_decimals():
    _, lines = _run("2364-05-01\n")
    assert lines[1] == "StarDate: 41330.60"


def test_convert_dates_all_valid():
    stdout = io.StringIO()
    assert convert_dates(["2323-01-01", "2324-12-31"], stdout) == 0
    assert stdout.getvalue().splitlines() == ["StarDate: 0.00", "StarDate: 1997.27"]


def test_convert_dates_with_invalid_entry():
    stdout = io.StringIO()
    assert convert_dates(["2023-02-29", "2024-02-29"], stdout) == 1
    assert stdout.getvalue().splitlines() == [
        "Invalid date format. Use YYYY-MM-DD.",
        "StarDate: -298838.80",
    ]
