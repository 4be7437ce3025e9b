# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_model_types.py
#   file_relpath : tests/model/test_model_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the documentation model value types and query helpers."""

from __future__ import annotations

import dataclasses

import pytest

from makehelp.model import UNCATEGORIZED, Category, DocumentationModel, FileDoc, build_target


def test_build_target_computes_summary_once() -> None:
    target = build_target("build", documentation=["Build the project. Then more."])
    assert target.summary.plain_text() == "Build the project."
    assert target.documentation == ("Build the project. Then more.",)


def test_targets_are_frozen() -> None:
    target = build_target("build")
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.name = "other"  # type: ignore[misc]


def test_uncategorized_is_compared_by_value() -> None:
    assert Category(UNCATEGORIZED).is_uncategorized
    assert Category("".join([])).is_uncategorized
    assert not Category(" ").is_uncategorized


def test_find_target_prefers_names_over_aliases(categorized_model: DocumentationModel) -> None:
    build = categorized_model.find_target("build")
    assert build is not None
    assert categorized_model.find_target("b") is build
    assert categorized_model.find_target("missing") is None


def test_find_target_name_wins_over_alias_of_earlier_target() -> None:
    first = build_target("a", aliases=["b"])
    second = build_target("b")
    model = DocumentationModel(categories=(Category(UNCATEGORIZED, (first, second)),))
    assert model.find_target("b") is second


def test_category_names_skip_uncategorized() -> None:
    model = DocumentationModel(
        categories=(Category(UNCATEGORIZED), Category("Build"), Category("Test"))
    )
    assert model.category_names() == ["Build", "Test"]


def test_target_count(categorized_model: DocumentationModel) -> None:
    assert categorized_model.target_count() == 2


def test_entry_point_and_included_docs(categorized_model: DocumentationModel) -> None:
    entry = categorized_model.entry_point_doc()
    assert entry is not None
    assert entry.source_file == "Makefile"
    assert [doc.source_file for doc in categorized_model.included_file_docs()] == [
        "mk/lint.mk",
        "mk/release.mk",
    ]


def test_undocumented_files_are_skipped() -> None:
    model = DocumentationModel(
        file_docs=(FileDoc("Makefile", (), is_entry_point=True), FileDoc("mk/a.mk"))
    )
    assert model.entry_point_doc() is None
    assert model.included_file_docs() == ()
