# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_text_renderer.py
#   file_relpath : tests/rendering/test_text_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the plain-text renderer."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from makehelp.errors import NilModelError, NilTargetError
from makehelp.model import DocumentationModel, Target, build_target
from makehelp.rendering import ColorScheme, RendererConfig, TextRenderer
from makehelp.rendering.colors import style

EXPECTED_HELP: str = """\
Usage: make [<target>...] [<ENV_VAR>=<value>...]

Project build automation.

Included files:
  mk/lint.mk
    Lint helpers.

    Run before pushing.

  mk/release.mk
    Release helpers.


Targets:

Build:
  - build b: Build the project.
    Vars: GOOS

Test:
  - test: Run the unit tests.
"""

EXPECTED_DETAIL: str = """\
Target: build
Aliases: b
Variables:
  - GOOS: Target operating system.

Build the project.
Uses the Go toolchain.

Source: Makefile:12
"""


def test_help_view(categorized_model: DocumentationModel) -> None:
    assert TextRenderer().render_help(categorized_model) == EXPECTED_HELP


def test_target_line_format(uncategorized_model: DocumentationModel) -> None:
    out = TextRenderer().render_help(uncategorized_model)
    assert "  - build b: Build the project.\n" in out
    assert "  - clean: Remove build artifacts.\n" in out


def test_uncategorized_has_no_category_header(uncategorized_model: DocumentationModel) -> None:
    out = TextRenderer().render_help(uncategorized_model)
    assert out.splitlines()[1:4] == ["", "Targets:", "  - build b: Build the project."]
    assert "\n:\n" not in out


def test_empty_model_has_no_targets_section(empty_model: DocumentationModel) -> None:
    out = TextRenderer().render_help(empty_model)
    assert out == "Usage: make [<target>...] [<ENV_VAR>=<value>...]\n"


def test_detailed_target(documented_target: Target) -> None:
    assert TextRenderer().render_detailed_target(documented_target) == EXPECTED_DETAIL


def test_basic_target() -> None:
    out = TextRenderer(RendererConfig(base_source_path=Path("/repo"))).render_basic_target(
        "fmt", "/repo/Makefile", 30
    )
    assert out == "Target: fmt\n\nNo documentation available.\n\nSource: Makefile:30\n"


def test_rich_text_is_flattened_and_urls_hidden() -> None:
    target = build_target(
        "docs", documentation=["See [the guide](https://example.com/guide) for **details**."]
    )
    out = TextRenderer().render_detailed_target(target)
    assert "See the guide for details." in out
    assert "https://example.com" not in out
    assert "**" not in out


def test_plain_output_has_no_ansi(categorized_model: DocumentationModel) -> None:
    assert "\x1b[" not in TextRenderer().render_help(categorized_model)


def test_color_output_uses_scheme(categorized_model: DocumentationModel) -> None:
    out = TextRenderer(RendererConfig(use_color=True)).render_help(categorized_model)
    assert click.style("build", fg="green", bold=True) in out
    assert click.style("Build:", fg="cyan", bold=True) in out


def test_custom_scheme_overrides_default(documented_target: Target) -> None:
    scheme = ColorScheme(target_name=style(fg="red"))
    out = TextRenderer(RendererConfig(use_color=True, color_scheme=scheme)).render_detailed_target(
        documented_target
    )
    assert out.startswith(click.style("Target: build", fg="red"))
    # Roles not set in the explicit scheme stay uncolored
    assert "Aliases: b\n" in out


def test_nil_inputs_raise() -> None:
    renderer = TextRenderer()
    with pytest.raises(NilModelError, match="text renderer"):
        renderer.render_help(None)
    with pytest.raises(NilTargetError):
        renderer.render_detailed_target(None)


def test_metadata() -> None:
    renderer = TextRenderer()
    assert renderer.content_type() == "text/plain"
    assert renderer.default_extension() == ".txt"
