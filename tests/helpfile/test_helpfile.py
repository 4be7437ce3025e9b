# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_helpfile.py
#   file_relpath : tests/helpfile/test_helpfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the includable help makefile generator."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from makehelp.errors import NilModelError
from makehelp.helpfile import HelpFileOptions, generate_help_file
from makehelp.model import DocumentationModel
from makehelp.rendering.make import PRINTF_PREFIX

FIXED_TIME: datetime = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _options(**overrides: object) -> HelpFileOptions:
    kwargs: dict[str, object] = {"makefiles": ("Makefile",), "generated_at": FIXED_TIME}
    kwargs.update(overrides)
    return HelpFileOptions(**kwargs)  # type: ignore[arg-type]


def test_header(uncategorized_model: DocumentationModel) -> None:
    lines = generate_help_file(uncategorized_model, _options()).splitlines()
    assert lines[:7] == [
        "# generated-by: makehelp",
        "# command: makehelp --color never helpfile help.json --output help.mk",
        "# date: 2025-01-02T03:04:05 UTC",
        "# ---",
        "# DO NOT EDIT",
        "",
        "MAKE_HELP_DIR := $(dir $(lastword $(MAKEFILE_LIST)))",
    ]
    assert "MAKE_HELP_MAKEFILES := $(MAKE_HELP_DIR)Makefile" in lines


def test_help_target_prints_help_view(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options())
    assert ".PHONY: help\n## Displays help for available targets.\nhelp:\n" in out
    assert f'{PRINTF_PREFIX}  - build b: Build the project."\n' in out
    assert "## !category" not in out


def test_one_help_target_per_documented_target(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options())
    assert ".PHONY: help-build\nhelp-build:\n" in out
    assert ".PHONY: help-clean\nhelp-clean:\n" in out
    assert f'{PRINTF_PREFIX}Target: build"\n' in out


def test_staleness_warning(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options())
    assert "\t@for f in $(MAKE_HELP_MAKEFILES); do \\\n" in out
    assert 'if [ "$$f" -nt "$(MAKE_HELP_DIR)help.mk" ]; then' in out
    assert "Warning: %s is newer than help.mk. Run make update-help to refresh." in out
    assert "\\033[0;33m" not in out


def test_colored_warning_and_flags(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options(use_color=True))
    assert "\\033[0;33mWarning:" in out
    assert "\t@makehelp --color always helpfile $(MAKE_HELP_DIR)help.json" in out
    assert "\x1b" not in out


def test_update_help_recipe(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options())
    assert out.endswith(
        ".PHONY: update-help\n"
        "## Regenerates help.mk from the documentation model.\n"
        "update-help:\n"
        "\t@makehelp --color never helpfile $(MAKE_HELP_DIR)help.json"
        " --output $(MAKE_HELP_DIR)help.mk --makefile $(MAKE_HELP_DIR)Makefile\n"
    )


def test_categorized_model_gets_help_category(categorized_model: DocumentationModel) -> None:
    out = generate_help_file(categorized_model, _options(help_category="Meta"))
    assert out.count("## !category Meta\n") == 2
    assert "--output help.mk --help-category Meta\n" in out
    assert "--makefile $(MAKE_HELP_DIR)Makefile --help-category Meta\n" in out


def test_makefiles_relative_to_help_dir(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(
        uncategorized_model,
        _options(makefiles=("build/Makefile", "build/mk/rules.mk"), makefile_dir="build"),
    )
    assert "MAKE_HELP_MAKEFILES := $(MAKE_HELP_DIR)Makefile $(MAKE_HELP_DIR)mk/rules.mk\n" in out


def test_explicit_command_line(empty_model: DocumentationModel) -> None:
    out = generate_help_file(empty_model, _options(command_line="make update-help"))
    assert "# command: make update-help\n" in out


def test_output_is_deterministic(categorized_model: DocumentationModel) -> None:
    assert generate_help_file(categorized_model, _options()) == generate_help_file(
        categorized_model, _options()
    )


def test_nil_model() -> None:
    with pytest.raises(NilModelError):
        generate_help_file(None)


def test_help_category_is_shell_and_make_quoted(uncategorized_model: DocumentationModel) -> None:
    out = generate_help_file(uncategorized_model, _options(help_category="Dev's $HOME"))
    header_flag = "--help-category 'Dev'\"'\"'s $HOME'"
    recipe_flag = "--help-category 'Dev'\"'\"'s $$HOME'"
    header = "# command: makehelp --color never helpfile help.json --output help.mk"
    assert f"{header} {header_flag}\n" in out
    assert out.endswith(f"--makefile $(MAKE_HELP_DIR)Makefile {recipe_flag}\n")
