"""Tests for the command line interface."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from loguru import logger

from a1_notation.cli import main
from a1_notation.logging import setup_logging
from a1_notation.parser import parse_args
from a1_notation.version import __version__


def _check_help_output(capsys: pytest.CaptureFixture[str], args: list[str], expected_options: list[str]) -> None:
    """Helper to run help and check options."""
    try:
        parse_args(args)
    except SystemExit:
        captured = capsys.readouterr()
        help_output = captured.err + captured.out
        for opt in expected_options:
            if opt.startswith("--"):
                assert opt in help_output, f"Option {opt} missing in help output"
            else:
                assert re.search(rf"\b{re.escape(opt)}\b", help_output), f"Subcommand {opt} missing in help output"
    else:
        pytest.fail("parse_args() should exit when called with --help")


def test_main_help_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that all top-level options appear in the main help output."""
    _check_help_output(capsys, ["--help"], ["--log-file", "--debug", "parse", "contains", "shift", "cells"])


def test_shift_help_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that all shift command options appear in its help output."""
    _check_help_output(capsys, ["shift", "--help"], ["--right", "--left", "--up", "--down", "--json", "--csv"])


def test_cells_help_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the cells command documents its limit."""
    _check_help_output(capsys, ["cells", "--help"], ["--limit", "--text"])


def test_parse_args_requires_command() -> None:
    """Test that the CLI requires a command."""
    with pytest.raises(SystemExit):
        parse_args([])
    with pytest.raises(SystemExit):
        parse_args(["--debug"])


def test_parse_args_format_options_are_exclusive() -> None:
    """Test that only one output format may be picked."""
    with pytest.raises(SystemExit):
        parse_args(["parse", "A1", "--json", "--csv"])


def test_parse_args_rejects_negative_shift() -> None:
    """Test that shift amounts must not be negative."""
    with pytest.raises(SystemExit):
        parse_args(["shift", "A1", "--left", "-1"])
    with pytest.raises(SystemExit):
        parse_args(["shift", "A1", "--left", "x"])


def test_parse_args_defaults() -> None:
    """Test default values of the shift command."""
    args = parse_args(["shift", "B2"])
    assert (args.right, args.left, args.up, args.down) == (0, 0, 0, 0)
    assert args.text
    assert not args.json


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the version option."""
    with pytest.raises(SystemExit):
        parse_args(["--version"])
    assert "a1-notation" in capsys.readouterr().out


def test_setup_logging_default(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that default logging shows INFO but not DEBUG messages."""
    setup_logging()
    logger.info("Test message")
    logger.debug("Hidden message")
    captured = capsys.readouterr()
    assert "Test message" in captured.err
    assert "Hidden message" not in captured.err


def test_setup_logging_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that verbose logging shows DEBUG messages."""
    setup_logging(verbose=True)
    logger.debug("Debug message")
    assert "Debug message" in capsys.readouterr().err


def test_setup_logging_file(tmp_path: Path) -> None:
    """Test logging to a file in a directory that does not exist yet."""
    log_file = tmp_path / "logs" / "a1.log"
    setup_logging(str(log_file))
    logger.info("File message")
    logger.remove()
    assert "File message" in log_file.read_text()


def test_setup_logging_unusable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a log file under a regular file is reported and stderr logging still works."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    setup_logging(str(blocker / "a1.log"), verbose=True)
    logger.info("Still logged")
    captured = capsys.readouterr()
    assert "Failed to set up log file" in captured.err
    assert "Still logged" in captured.err
    assert "Also logging to" not in captured.err
    assert blocker.read_text() == "not a directory"


def test_setup_logging_reports_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the start-up debug line names the version and level."""
    setup_logging(verbose=True)
    assert f"a1-notation {__version__}, log level DEBUG" in capsys.readouterr().err


def test_main_parse(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the parse command in text format."""
    assert main(["parse", "foo!a:d", "$b$2", "C5:D9,G9:H16"]) == 0
    assert capsys.readouterr().out.splitlines() == ["foo!A:D", "$B$2", "C5:D9,G9:H16"]


def test_main_parse_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the parse command in JSON format."""
    assert main(["parse", "Foo!A:D", "--json"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "references": [{"reference": "Foo!A:D", "sheet_name": "Foo", "kind": "column_range", "size": 4}]
    }


def test_main_parse_csv(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the parse command in CSV format."""
    assert main(["parse", "A1", "3:3", "--csv"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Reference,Sheet,Kind,Size", "A1,,cell,1", "3:3,,row,1"]


def test_main_parse_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that invalid references are reported and valid ones still printed."""
    assert main(["parse", "A1", "A0"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["A1"]
    assert "Error: Row numbers start at 1" in captured.err


def test_main_contains(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the contains command exit status and output."""
    assert main(["contains", "A:A", "A1"]) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert main(["contains", "C3:J20", "B2"]) == 1
    assert capsys.readouterr().out.strip() == "false"


def test_main_contains_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the contains command in JSON format."""
    assert main(["contains", "1:5", "B2", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"outer": "1:5", "inner": "B2", "contains": True}


def test_main_contains_csv(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the contains command in CSV format."""
    assert main(["contains", "A1", "B1", "--csv"]) == 1
    assert capsys.readouterr().out.splitlines() == ["Outer,Inner,Contains", "A1,B1,false"]


def test_main_contains_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the contains command with an invalid reference."""
    assert main(["contains", "A:A", "1A"]) == 1
    assert "Invalid cell" in capsys.readouterr().err


def test_main_shift(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the shift command."""
    assert main(["shift", "A1", "--right", "3", "--down", "2", "--left", "1"]) == 0
    assert capsys.readouterr().out.strip() == "C3"
    assert main(["shift", "Data!$B$2:C3", "--up", "5"]) == 0
    assert capsys.readouterr().out.strip() == "Data!$B$1:C1"


def test_main_cells(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the cells command."""
    assert main(["cells", "A1:C3"]) == 0
    assert capsys.readouterr().out.split() == ["A1", "B1", "C1", "A2", "B2", "C2", "A3", "B3", "C3"]


def test_main_cells_limit(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the cells command stops at the limit."""
    assert main(["cells", "D:G", "--limit", "2"]) == 0
    assert capsys.readouterr().out.split() == ["D:D", "E:E"]


def test_main_invalid_sheet_name(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that an empty sheet name is reported."""
    assert main(["cells", "''!A1"]) == 1
    assert "Error: Empty sheet name" in capsys.readouterr().err
