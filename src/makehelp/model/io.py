# topmark:header:start
#
#   project      : MakeHelp
#   file         : io.py
#   file_relpath : src/makehelp/model/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a documentation model serialized by a build-file scanner.

The scanner (an external collaborator) hands MakeHelp a JSON document with the
same camelCase vocabulary the JSON renderer emits::

    {
      "fileDocs": [
        {"sourceFile": "Makefile", "documentation": ["..."],
         "isEntryPoint": true, "discoveryOrder": 0}
      ],
      "hasCategories": true,
      "categories": [
        {"name": "Build", "targets": [
          {"name": "build", "aliases": ["b"], "documentation": ["..."],
           "variables": [{"name": "GOOS", "description": "..."}],
           "sourceFile": "Makefile", "lineNumber": 12}
        ]}
      ]
    }

All keys are optional except ``name`` on targets and variables and
``sourceFile`` on file docs. Summaries are computed here, once per target.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

from makehelp.config.logging import get_logger
from makehelp.errors import ModelLoadError
from makehelp.model.builder import build_target
from makehelp.model.types import UNCATEGORIZED, Category, DocumentationModel, FileDoc, Variable

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from makehelp.model.types import Target

logger = get_logger(__name__)

_T = TypeVar("_T")


def _expect(value: object, kind: type[_T], where: str) -> _T:
    # bool is an int subclass; never accept it where a number is expected
    if isinstance(value, bool) and kind is not bool:
        raise ModelLoadError(f"{where}: expected {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise ModelLoadError(f"{where}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _mapping(value: object, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ModelLoadError(f"{where}: expected an object, got {type(value).__name__}")
    return cast("Mapping[str, Any]", value)


def _str_list(value: object, where: str) -> tuple[str, ...]:
    items: list[Any] = _expect(value, list, where)
    return tuple(_expect(item, str, f"{where}[{i}]") for i, item in enumerate(items))


def _list_of(
    data: Mapping[str, Any],
    key: str,
    where: str,
    convert: Callable[[object, str], _T],
) -> tuple[_T, ...]:
    items: list[Any] = _expect(data.get(key, []), list, f"{where}.{key}")
    return tuple(convert(item, f"{where}.{key}[{i}]") for i, item in enumerate(items))


def _variable_from_dict(value: object, where: str) -> Variable:
    data: Mapping[str, Any] = _mapping(value, where)
    return Variable(
        name=_expect(data.get("name"), str, f"{where}.name"),
        description=_expect(data.get("description", ""), str, f"{where}.description"),
    )


def _target_from_dict(value: object, where: str) -> Target:
    data: Mapping[str, Any] = _mapping(value, where)
    return build_target(
        _expect(data.get("name"), str, f"{where}.name"),
        documentation=_str_list(data.get("documentation", []), f"{where}.documentation"),
        aliases=_str_list(data.get("aliases", []), f"{where}.aliases"),
        variables=_list_of(data, "variables", where, _variable_from_dict),
        source_file=_expect(data.get("sourceFile", ""), str, f"{where}.sourceFile"),
        line_number=_expect(data.get("lineNumber", 0), int, f"{where}.lineNumber"),
    )


def _category_from_dict(value: object, where: str) -> Category:
    data: Mapping[str, Any] = _mapping(value, where)
    name: object = data.get("name", UNCATEGORIZED)
    return Category(
        name=UNCATEGORIZED if name is None else _expect(name, str, f"{where}.name"),
        targets=_list_of(data, "targets", where, _target_from_dict),
    )


def _file_doc_from_dict(value: object, where: str) -> FileDoc:
    data: Mapping[str, Any] = _mapping(value, where)
    return FileDoc(
        source_file=_expect(data.get("sourceFile"), str, f"{where}.sourceFile"),
        documentation=_str_list(data.get("documentation", []), f"{where}.documentation"),
        is_entry_point=_expect(data.get("isEntryPoint", False), bool, f"{where}.isEntryPoint"),
        discovery_order=_expect(data.get("discoveryOrder", 0), int, f"{where}.discoveryOrder"),
    )


def model_from_dict(data: object) -> DocumentationModel:
    """Build a `DocumentationModel` from decoded JSON.

    Args:
        data (object): The decoded JSON document.

    Returns:
        DocumentationModel: The frozen model.

    Raises:
        ModelLoadError: If the document does not have the expected shape.
    """
    root: Mapping[str, Any] = _mapping(data, "$")
    categories: tuple[Category, ...] = _list_of(root, "categories", "$", _category_from_dict)
    has_categories_raw: object = root.get("hasCategories")
    has_categories: bool = (
        any(not c.is_uncategorized for c in categories)
        if has_categories_raw is None
        else _expect(has_categories_raw, bool, "$.hasCategories")
    )
    model = DocumentationModel(
        file_docs=_list_of(root, "fileDocs", "$", _file_doc_from_dict),
        has_categories=has_categories,
        categories=categories,
    )
    logger.debug(
        "Loaded model: %d file doc(s), %d categor(ies), %d target(s)",
        len(model.file_docs),
        len(model.categories),
        model.target_count(),
    )
    return model


def load_model(path: Path) -> DocumentationModel:
    """Read a JSON documentation model from ``path``.

    Raises:
        ModelLoadError: If the file cannot be read, is not valid JSON, or has
            the wrong shape.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelLoadError(f"cannot read model file {path}: {exc}") from exc
    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ModelLoadError(f"{path}: invalid JSON: {exc}") from exc
    return model_from_dict(data)
