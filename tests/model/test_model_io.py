# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_model_io.py
#   file_relpath : tests/model/test_model_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading the scanner's JSON documentation model."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import pytest

from makehelp.errors import ModelLoadError
from makehelp.model import UNCATEGORIZED, Variable
from makehelp.model.io import load_model, model_from_dict
from tests.models_makehelp import SAMPLE_MODEL_DICT

if TYPE_CHECKING:
    from pathlib import Path


def test_load_model_reads_sample(model_file: Path) -> None:
    model = load_model(model_file)
    assert model.has_categories
    assert [c.name for c in model.categories] == ["Build"]
    build = model.find_target("b")
    assert build is not None
    assert build.name == "build"
    assert build.summary.plain_text() == "Build the project."
    assert build.variables == (Variable("GOOS", "Target operating system."),)
    assert (build.source_file, build.line_number) == ("Makefile", 12)
    fmt = model.find_target("fmt")
    assert fmt is not None
    assert fmt.documentation == ()
    assert not fmt.summary


def test_empty_document_is_an_empty_model() -> None:
    model = model_from_dict({})
    assert model.categories == ()
    assert model.file_docs == ()
    assert not model.has_categories


def test_has_categories_is_derived_when_absent() -> None:
    named = model_from_dict({"categories": [{"name": "Build", "targets": []}]})
    unnamed = model_from_dict({"categories": [{"targets": []}]})
    assert named.has_categories
    assert not unnamed.has_categories
    assert unnamed.categories[0].name == UNCATEGORIZED


def test_null_category_name_is_uncategorized() -> None:
    model = model_from_dict({"categories": [{"name": None, "targets": [{"name": "x"}]}]})
    assert model.categories[0].is_uncategorized


@pytest.mark.parametrize(
    "document, where",
    [
        ([], "$"),
        ({"categories": {}}, "$.categories"),
        ({"categories": [{"targets": [{}]}]}, "$.categories[0].targets[0].name"),
        ({"categories": [{"targets": [{"name": "x", "lineNumber": "3"}]}]}, "lineNumber"),
        ({"categories": [{"targets": [{"name": "x", "lineNumber": True}]}]}, "got bool"),
        ({"categories": [{"targets": [{"name": "x", "aliases": [1]}]}]}, "aliases[0]"),
        ({"fileDocs": [{"documentation": []}]}, "$.fileDocs[0].sourceFile"),
        ({"hasCategories": "yes"}, "$.hasCategories"),
    ],
)
def test_malformed_documents_name_the_offending_path(document: Any, where: str) -> None:
    with pytest.raises(ModelLoadError, match=re.escape(where)):
        model_from_dict(document)


def test_load_model_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ModelLoadError, match="invalid JSON"):
        load_model(path)


def test_load_model_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ModelLoadError, match="cannot read model file"):
        load_model(tmp_path / "missing.json")


def test_sample_dict_is_not_mutated() -> None:
    before = repr(SAMPLE_MODEL_DICT)
    model_from_dict(SAMPLE_MODEL_DICT)
    assert repr(SAMPLE_MODEL_DICT) == before
