"""
Top-level import extraction.

Converts the import statements found directly under the module node into
ImportRecords. Statements that do not have a recognizable shape (which is
common while code is being typed) are skipped rather than reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from tree_sitter import Node

from .records import ImportedName, ImportKind, ImportRecord, Span
from .source import SourceDocument

logger = logging.getLogger(__name__)

IMPORT_NODE_TYPES = ("import_statement", "import_from_statement", "future_import_statement")

# Tokens that carry a name (or the wildcard) inside an import list
_NAME_TYPES = {"dotted_name", "identifier", "wildcard_import"}

# Tokens skipped while grouping names
_SKIPPED_TYPES = {"as", "(", ")", "comment"}


class _ScanState(Enum):
    AWAITING_NAME = "awaiting-name"
    AWAITING_SEPARATOR = "awaiting-separator"


def extract_imports(document: SourceDocument) -> list[ImportRecord]:
    """Extract the top-level imports of a document in source order.

    Args:
        document: Parsed source

    Returns:
        One record per imported module for ``import`` statements and one
        record per ``from`` statement
    """
    records: list[ImportRecord] = []
    for node in document.root.children:
        if node.type not in IMPORT_NODE_TYPES:
            continue
        first = node.children[0] if node.children else None
        if first is None:
            continue
        if first.type == "from":
            record = _from_import(node, document)
            if record is not None:
                records.append(record)
        elif first.type == "import":
            records.extend(_module_imports(node, document))

    logger.debug("Extracted %d top-level import records", len(records))
    return records


def _statement_span(node: Node, document: SourceDocument) -> tuple[Span, int | None]:
    """Span of a statement including comments that trail it on its last line."""
    end_node = node
    # Named siblings only: a ';' between statements is not an insertion target
    sibling = node.next_named_sibling
    while sibling is not None and sibling.type == "comment" and sibling.start_point[0] == end_node.end_point[0]:
        end_node = sibling
        sibling = sibling.next_named_sibling
    span = Span(document.position(node.start_byte), document.position(end_node.end_byte))
    next_start = document.position(sibling.start_byte) if sibling is not None else None
    return span, next_start


def _text(node: Node | None, document: SourceDocument) -> str:
    if node is None or node.is_missing:
        return ""
    return document.node_text(node)


def _module_imports(node: Node, document: SourceDocument) -> list[ImportRecord]:
    """Records for ``import a``, ``import a as b`` and ``import a, b``."""
    span, next_start = _statement_span(node, document)
    records = []
    for item in node.children_by_field_name("name"):
        alias = None
        if item.type == "aliased_import":
            module = _text(item.child_by_field_name("name"), document)
            alias = _text(item.child_by_field_name("alias"), document) or None
        else:
            module = _text(item, document)
        if not module:
            continue
        records.append(
            ImportRecord(
                kind=ImportKind.MODULE,
                module=module,
                alias=alias,
                span=span,
                names_end=document.position(node.end_byte),
                next_sibling_start=next_start,
            )
        )
    return records


def _from_import(node: Node, document: SourceDocument) -> ImportRecord | None:
    """Record for ``from a import b, c as d`` and its parenthesized and wildcard forms."""
    module_node = node.child_by_field_name("module_name")
    if module_node is None and node.type == "future_import_statement":
        module_node = next((c for c in node.children if c.type == "__future__"), None)
    module = _text(module_node, document)
    if not module:
        return None

    import_node = next((c for c in node.children if c.type == "import"), None)
    if import_node is None:
        return None

    names: list[ImportedName] = []
    current: ImportedName | None = None
    state = _ScanState.AWAITING_NAME
    names_end_byte = None

    sibling = import_node.next_sibling
    while sibling is not None:
        for token in _flatten(sibling):
            if token.is_missing or token.start_byte == token.end_byte:
                continue
            is_name = token.type in _NAME_TYPES
            if state is _ScanState.AWAITING_NAME:
                if is_name:
                    current = ImportedName(name=document.node_text(token))
                    names_end_byte = token.end_byte
                    state = _ScanState.AWAITING_SEPARATOR
            elif is_name:
                # Recovered "b as c as d": the first alias is kept
                if current.alias is None:
                    current.alias = document.node_text(token)
                names_end_byte = token.end_byte
            elif token.type in _SKIPPED_TYPES:
                continue
            elif token.type == ",":
                names.append(current)
                current = None
                state = _ScanState.AWAITING_NAME
        sibling = sibling.next_sibling

    if current is not None:
        names.append(current)
    if not names:
        return None

    span, next_start = _statement_span(node, document)
    return ImportRecord(
        kind=ImportKind.FROM,
        module=module,
        names=names,
        span=span,
        names_end=document.position(names_end_byte),
        next_sibling_start=next_start,
    )


def _flatten(node: Node) -> Iterator[Node]:
    """Yield the tokens of an import list item; ``a as b`` becomes three tokens."""
    if node.type == "aliased_import":
        for child in node.children:
            yield from _flatten(child)
    else:
        yield node
