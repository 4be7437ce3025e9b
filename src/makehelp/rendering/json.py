# topmark:header:start
#
#   project      : MakeHelp
#   file         : json.py
#   file_relpath : src/makehelp/rendering/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON renderer for machine consumers.

Tokens are folded into plain dicts, then serialized once with `json.dumps`
(2-space indent, trailing newline). String escaping is left entirely to the
serializer. Rich text is flattened to its visible text; documentation lines
are passed through as authored.

Help view shape (camelCase keys, empty optional fields omitted)::

    {
      "usage": "make [<target>...] [<ENV_VAR>=<value>...]",
      "description": "line 1\\nline 2",
      "includedFiles": [{"path": "...", "description": "..."}],
      "categories": [
        {"name": "Build", "targets": [
          {"name": "build", "summary": "...", "aliases": ["b"],
           "variables": [{"name": "GOOS", "description": "..."}],
           "sourceFile": "Makefile", "lineNumber": 12}
        ]}
      ]
    }

The detailed view is a single target object with an extra ``documentation``
array; the basic view has ``name``, ``sourceFile`` and ``lineNumber`` only.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from makehelp.rendering.base import Renderer
from makehelp.rendering.tokens import Token, TokenKind, relative_source_path

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from makehelp.model.types import Target, Variable
    from makehelp.rendering.config import RendererConfig

JSON_INDENT: Final[int] = 2

# Key order of a detailed target object
_DETAIL_KEYS: Final[tuple[str, ...]] = (
    "name",
    "summary",
    "documentation",
    "aliases",
    "variables",
    "sourceFile",
    "lineNumber",
)


def _omit_empty(obj: dict[str, Any]) -> dict[str, Any]:
    # "name" is never empty; callers add required keys outside this helper
    return {key: value for key, value in obj.items() if value not in ("", 0, [], None)}


def _variable_dict(variable: Variable) -> dict[str, Any]:
    return _omit_empty({"name": variable.name, "description": variable.description})


def dumps(payload: dict[str, Any]) -> str:
    """Serialize ``payload`` the way every JSON view is written."""
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False) + "\n"


class JsonRenderer(Renderer):
    """Render help as a JSON document."""

    name = "json"
    mime_type = "application/json"
    extension = ".json"

    def __init__(self, config: RendererConfig | None = None) -> None:
        super().__init__(config)
        self._help_folders: dict[TokenKind, Callable[[dict[str, Any], Token], None]] = {
            TokenKind.USAGE: self._fold_usage,
            TokenKind.DESCRIPTION_LINE: self._fold_description_line,
            TokenKind.INCLUDED_FILE: self._fold_included_file,
            TokenKind.INCLUDED_FILE_LINE: self._fold_included_file_line,
            TokenKind.CATEGORY_START: self._fold_category,
            TokenKind.TARGET: self._fold_target,
        }
        self._target_folders: dict[TokenKind, Callable[[dict[str, Any], Token], None]] = {
            TokenKind.TITLE: self._fold_title,
            TokenKind.ALIASES: self._fold_aliases,
            TokenKind.VARIABLE: self._fold_variable,
            TokenKind.DOCUMENTATION_LINE: self._fold_documentation_line,
            TokenKind.SOURCE: self._fold_source,
        }

    # --- help view -----------------------------------------------------------

    def help_payload(self, tokens: tuple[Token, ...]) -> dict[str, Any]:
        """Fold help-view tokens into the JSON payload (before serialization)."""
        out: dict[str, Any] = {}
        for token in tokens:
            folder = self._help_folders.get(token.kind)
            if folder is not None:
                folder(out, token)
        if "description" in out:
            out["description"] = "\n".join(out["description"])
        for included in out.get("includedFiles", []):
            lines: list[str] = included.pop("lines")
            if lines:
                included["description"] = "\n".join(lines)
        return out

    def _help_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        yield dumps(self.help_payload(tokens))

    def _fold_usage(self, out: dict[str, Any], token: Token) -> None:
        out["usage"] = token.text

    def _fold_description_line(self, out: dict[str, Any], token: Token) -> None:
        out.setdefault("description", []).append(token.text)

    def _fold_included_file(self, out: dict[str, Any], token: Token) -> None:
        out.setdefault("includedFiles", []).append({"path": token.text, "lines": []})

    def _fold_included_file_line(self, out: dict[str, Any], token: Token) -> None:
        out["includedFiles"][-1]["lines"].append(token.text)

    def _fold_category(self, out: dict[str, Any], token: Token) -> None:
        out.setdefault("categories", []).append({"name": token.text, "targets": []})

    def _fold_target(self, out: dict[str, Any], token: Token) -> None:
        assert token.target is not None  # static type check
        out["categories"][-1]["targets"].append(self._target_dict(token.target))

    def _target_dict(self, target: Target) -> dict[str, Any]:
        return _omit_empty(
            {
                "name": target.name,
                "summary": target.summary.plain_text(),
                "aliases": list(target.aliases),
                "variables": [_variable_dict(v) for v in target.variables],
                "sourceFile": relative_source_path(
                    target.source_file, self._config.base_source_path
                ),
                "lineNumber": target.line_number,
            }
        )

    # --- target views --------------------------------------------------------

    def target_payload(self, tokens: tuple[Token, ...]) -> dict[str, Any]:
        """Fold detailed or basic target tokens into the JSON payload."""
        out: dict[str, Any] = {}
        for token in tokens:
            folder = self._target_folders.get(token.kind)
            if folder is not None:
                folder(out, token)
        return {key: out[key] for key in _DETAIL_KEYS if key in out}

    def _target_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        yield dumps(self.target_payload(tokens))

    def _fold_title(self, out: dict[str, Any], token: Token) -> None:
        out["name"] = token.text
        if token.target is not None:
            summary: str = token.target.summary.plain_text()
            if summary:
                out["summary"] = summary

    def _fold_variable(self, out: dict[str, Any], token: Token) -> None:
        assert token.variable is not None  # static type check
        out.setdefault("variables", []).append(_variable_dict(token.variable))

    def _fold_source(self, out: dict[str, Any], token: Token) -> None:
        out["sourceFile"] = token.source_file
        if token.line_number:
            out["lineNumber"] = token.line_number

    def _fold_aliases(self, out: dict[str, Any], token: Token) -> None:
        out["aliases"] = list(token.items)

    def _fold_documentation_line(self, out: dict[str, Any], token: Token) -> None:
        out.setdefault("documentation", []).append(token.text)
