# topmark:header:start
#
#   project      : MakeHelp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MakeHelp test suite.

Sets TRACE logging for the whole run and exposes the sample models from
`tests.models_makehelp` as fixtures.

Notes:
    Models are frozen; build variations with `dataclasses.replace` or
    `makehelp.model.build_target` instead of mutating a fixture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from makehelp.config import logging
from makehelp.model import DocumentationModel
from tests.models_makehelp import (
    make_build_target,
    make_categorized_model,
    make_uncategorized_model,
    model_document,
)

if TYPE_CHECKING:
    from pathlib import Path

    from makehelp.model import Target

# Environment variables that change logging or color decisions
_ENV_OVERRIDES: tuple[str, ...] = ("MAKEHELP_LOG_LEVEL", "NO_COLOR", "FORCE_COLOR")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot force log levels or colors during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in _ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def documented_target() -> Target:
    """A documented target with one alias and one variable."""
    return make_build_target()


@pytest.fixture
def categorized_model() -> DocumentationModel:
    """A model with file docs and two named categories."""
    return make_categorized_model()


@pytest.fixture
def uncategorized_model() -> DocumentationModel:
    """A model whose only category is the uncategorized sentinel."""
    return make_uncategorized_model()


@pytest.fixture
def empty_model() -> DocumentationModel:
    """A model without file docs or targets."""
    return DocumentationModel()


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    """Write the sample scanner document to ``help.json`` in a temporary directory."""
    path: Path = tmp_path / "help.json"
    path.write_text(model_document(), encoding="utf-8")
    return path
