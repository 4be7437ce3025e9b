# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `formats`, `helpfile` and `version` commands and the bare group."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from makehelp.cli.exit_codes import ExitCode
from makehelp.constants import MAKEHELP_VERSION
from tests.cli.cli_helpers import run_cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_no_subcommand_prints_help() -> None:
    result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS
    assert "Hint: use 'makehelp render MODEL.json'" in result.output
    assert "render" in result.output
    assert "helpfile" in result.output


def test_formats_listing() -> None:
    result = run_cli(["formats"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines = result.output.splitlines()
    assert lines[0] == "Supported output formats:"
    assert "  make (alias: mk)  text/x-makefile  .mk" in lines
    assert "  text (alias: txt)  text/plain  .txt" in lines
    assert "  html  text/html  .html" in lines
    assert "  markdown (alias: md)  text/markdown  .md" in lines
    assert "  json  application/json  .json" in lines


def test_version_plain() -> None:
    result = run_cli(["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == MAKEHELP_VERSION


def test_version_json() -> None:
    result = run_cli(["version", "--json"])
    assert result.exit_code == ExitCode.SUCCESS
    assert json.loads(result.output) == {"version": MAKEHELP_VERSION}


def test_helpfile_writes_makefile(model_file: Path, tmp_path: Path) -> None:
    (tmp_path / "Makefile").write_text("include help.mk\n", encoding="utf-8")
    result = run_cli(["helpfile", "help.json", "--makefile", "Makefile"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Wrote help.mk" in result.output

    text = (tmp_path / "help.mk").read_text(encoding="utf-8")
    assert text.startswith("# generated-by: makehelp\n")
    assert "# command: makehelp --color never helpfile help.json --output help.mk\n" in text
    assert "MAKE_HELP_MAKEFILES := $(MAKE_HELP_DIR)Makefile\n" in text
    assert "help-build:\n" in text
    assert "## !category Help\n" in text
    assert "\x1b" not in text


def test_helpfile_into_subdirectory(model_file: Path, tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()
    result = run_cli(
        [
            "--color",
            "always",
            "helpfile",
            str(model_file),
            "-o",
            "docs/help.mk",
            "--help-category",
            "Meta",
        ]
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Warning: no --makefile given" in result.output

    text = (tmp_path / "docs" / "help.mk").read_text(encoding="utf-8")
    assert "# command: makehelp --color always helpfile ../help.json --output help.mk" in text
    assert "## !category Meta\n" in text
    assert "\\033[0;33mWarning:" in text


def test_helpfile_missing_model() -> None:
    result = run_cli(["helpfile", "nothing.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "model file not found" in result.output


def test_unknown_color_choice() -> None:
    result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code == 2
