# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documentation model consumed by the renderers."""

from __future__ import annotations

from makehelp.model.builder import build_target
from makehelp.model.types import (
    UNCATEGORIZED,
    Category,
    DocumentationModel,
    FileDoc,
    Target,
    Variable,
)

__all__ = [
    "UNCATEGORIZED",
    "Category",
    "DocumentationModel",
    "FileDoc",
    "Target",
    "Variable",
    "build_target",
]
