"""
Normalized import records.

The tree-sitter tree is awkward to query repeatedly, so top-level imports are
converted once into these plain records. Positions are stored as integers;
nothing here keeps a reference to a tree node.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ImportKind(str, Enum):
    """Surface form of an import statement."""

    MODULE = "import"  # import a.b [as c]
    FROM = "from"  # from a.b import c [as d], ...


WILDCARD = "*"


@dataclass(frozen=True)
class Span:
    """Character range of a node in its own text."""

    start: int
    end: int


@dataclass
class ImportedName:
    """A name imported by a from-import, with its optional alias."""

    name: str
    alias: str | None = None


@dataclass
class ImportRecord:
    """One import found at the top level of a module.

    Attributes:
        kind: Whether this is an ``import`` or a ``from ... import``
        module: Dotted module path (relative imports keep their leading dots)
        span: Range of the whole statement
        names_end: Position right after the last imported name
        next_sibling_start: Start of the next top-level node, if any
        alias: Alias of the module (module imports only)
        names: Imported names in source order (from-imports only)
    """

    kind: ImportKind
    module: str
    span: Span
    names_end: int
    next_sibling_start: int | None = None
    alias: str | None = None
    names: list[ImportedName] | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.names is not None and len(self.names) == 1 and self.names[0].name == WILDCARD

    def binds(self, name: str) -> bool:
        """Check whether this from-import binds ``name`` under its own name."""
        return any(n.name == name and not n.alias for n in self.names or [])


@dataclass(frozen=True)
class RequiredImport:
    """An atomic import the merged buffer must provide.

    ``name`` is None for a whole-module import and ``"*"`` for a wildcard.
    """

    module: str
    name: str | None = None

    def render(self) -> str:
        """Render as a standalone import statement."""
        if self.name is None:
            return f"import {self.module}"
        return f"from {self.module} import {self.name}"
