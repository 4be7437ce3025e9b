# topmark:header:start
#
#   project      : MakeHelp
#   file         : types.py
#   file_relpath : src/makehelp/model/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable documentation model.

One `DocumentationModel` is built per invocation by the build-file scanner and
consumed read-only by the renderers. Every sequence is a tuple that preserves
insertion order; renderers never reorder categories or targets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from makehelp.richtext.types import EMPTY_RICH_TEXT, RichText

# Category name meaning "no explicit grouping". Compared by value, never by emptiness.
UNCATEGORIZED: Final[str] = ""


@dataclass(frozen=True)
class Variable:
    """A variable documented for a target.

    Attributes:
        name (str): Variable name (e.g. ``GOOS``).
        description (str): Free-form description; empty means "none".
    """

    name: str
    description: str = ""


@dataclass(frozen=True)
class Target:
    """A documented build target.

    Attributes:
        name (str): Primary target name.
        aliases (tuple[str, ...]): Alternative names, in declaration order.
        summary (RichText): Precomputed one-sentence summary of ``documentation``.
        documentation (tuple[str, ...]): Full documentation lines.
        variables (tuple[Variable, ...]): Documented variables.
        source_file (str): File the target is defined in; empty if unknown.
        line_number (int): Line of the target definition; 0 if unknown.

    Notes:
        Use `makehelp.model.builder.build_target` to get ``summary`` computed
        from ``documentation``.
    """

    name: str
    aliases: tuple[str, ...] = ()
    summary: RichText = EMPTY_RICH_TEXT
    documentation: tuple[str, ...] = ()
    variables: tuple[Variable, ...] = ()
    source_file: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class Category:
    """A named group of targets.

    Attributes:
        name (str): Category name, or `UNCATEGORIZED`.
        targets (tuple[Target, ...]): Targets in insertion order.
    """

    name: str
    targets: tuple[Target, ...] = ()

    @property
    def is_uncategorized(self) -> bool:
        """True if this is the implicit group that renders without a header."""
        return self.name == UNCATEGORIZED


@dataclass(frozen=True)
class FileDoc:
    """File-level documentation of one build file.

    Attributes:
        source_file (str): Path of the build file.
        documentation (tuple[str, ...]): Documentation lines.
        is_entry_point (bool): True for the top-level build file.
        discovery_order (int): Order in which the file was discovered.
    """

    source_file: str
    documentation: tuple[str, ...] = ()
    is_entry_point: bool = False
    discovery_order: int = 0


@dataclass(frozen=True)
class DocumentationModel:
    """Everything a renderer needs, fully materialized.

    Attributes:
        file_docs (tuple[FileDoc, ...]): File documentation blocks.
        has_categories (bool): True if targets were explicitly grouped.
        categories (tuple[Category, ...]): Categories in insertion order.
    """

    file_docs: tuple[FileDoc, ...] = ()
    has_categories: bool = False
    categories: tuple[Category, ...] = ()

    def entry_point_doc(self) -> FileDoc | None:
        """Return the documented entry-point file, if any."""
        for doc in self.file_docs:
            if doc.is_entry_point and doc.documentation:
                return doc
        return None

    def included_file_docs(self) -> tuple[FileDoc, ...]:
        """Return documented non-entry-point files, ordered by discovery order."""
        included = [doc for doc in self.file_docs if not doc.is_entry_point and doc.documentation]
        # sorted() is stable: equal discovery orders keep insertion order
        return tuple(sorted(included, key=lambda doc: doc.discovery_order))

    def find_target(self, name: str) -> Target | None:
        """Return the target called ``name`` or aliased as ``name``."""
        for category in self.categories:
            for target in category.targets:
                if target.name == name:
                    return target
        for category in self.categories:
            for target in category.targets:
                if name in target.aliases:
                    return target
        return None

    def category_names(self) -> list[str]:
        """Return the names of all explicitly named categories."""
        return [c.name for c in self.categories if not c.is_uncategorized]

    def target_count(self) -> int:
        """Return the total number of targets across all categories."""
        return sum(len(c.targets) for c in self.categories)
