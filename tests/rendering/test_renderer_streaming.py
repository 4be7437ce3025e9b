# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_renderer_streaming.py
#   file_relpath : tests/rendering/test_renderer_streaming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the streaming API shared by all renderers."""

from __future__ import annotations

import io

import pytest

from makehelp.errors import NilModelError, NilTargetError
from makehelp.model import DocumentationModel, Target
from makehelp.rendering import OutputFormat, create_renderer

ALL_FORMATS: list[OutputFormat] = list(OutputFormat)


class FailingSink(io.StringIO):
    """Text sink whose ``write`` fails after ``limit`` calls."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.calls = 0

    def write(self, s: str) -> int:
        self.calls += 1
        if self.calls > self.limit:
            raise OSError("disk full")
        return super().write(s)


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_write_matches_render(fmt: OutputFormat, categorized_model: DocumentationModel) -> None:
    renderer = create_renderer(fmt)
    sink = io.StringIO()
    renderer.write_help(categorized_model, sink)
    assert sink.getvalue() == renderer.render_help(categorized_model)


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_write_errors_propagate(fmt: OutputFormat, documented_target: Target) -> None:
    renderer = create_renderer(fmt)
    sink = FailingSink(limit=0)
    with pytest.raises(OSError, match="disk full"):
        renderer.write_detailed_target(documented_target, sink)
    assert sink.calls == 1


def test_partial_output_is_not_rolled_back(categorized_model: DocumentationModel) -> None:
    sink = FailingSink(limit=2)
    with pytest.raises(OSError):
        create_renderer("text").write_help(categorized_model, sink)
    assert sink.getvalue() == "Usage: make [<target>...] [<ENV_VAR>=<value>...]\n\n"


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_nil_inputs(fmt: OutputFormat) -> None:
    renderer = create_renderer(fmt)
    with pytest.raises(NilModelError):
        renderer.write_help(None, io.StringIO())
    with pytest.raises(NilTargetError):
        renderer.write_detailed_target(None, io.StringIO())


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_rendering_is_deterministic(
    fmt: OutputFormat, categorized_model: DocumentationModel
) -> None:
    first = create_renderer(fmt).render_help(categorized_model)
    second = create_renderer(fmt).render_help(categorized_model)
    assert first == second
