"""
Placement of the non-import part of a snippet.

New code goes right after the buffer's import block, before the first
statement that follows it. Inserts are whole lines, so the inserted text
always ends with a newline.
"""

from __future__ import annotations

import logging
from enum import Enum

from .base import Edit
from .records import ImportRecord

logger = logging.getLogger(__name__)


class Relation(Enum):
    """Where the remainder goes relative to the buffer's last import.

    DEFAULT is used when there is nothing to be relative to (no imports).
    """

    BEFORE = "before"  # before the statement following the last import
    AFTER = "after"  # after the last import, which ends the buffer
    DEFAULT = "default"  # start of the buffer


def separate_import_block(edits: list[Edit], current: list[ImportRecord]) -> None:
    """Terminate the import lines added to a buffer that had no imports.

    All such edits insert at position 0 in production order. Each import line
    is ended with a newline, and the last one with two so the new import block
    is separated from the code after it.
    """
    if current or not edits:
        return
    for edit in edits[:-1]:
        edit.insert += "\n"
    edits[-1].insert += "\n\n"


def plan_remainder_edit(remainder: str, current: list[ImportRecord]) -> Edit | None:
    """Plan the insertion of the snippet's non-import code.

    Args:
        remainder: Snippet text after its imports, already stripped
        current: Top-level imports of the buffer

    Returns:
        The insertion, or None if there is nothing to insert
    """
    if not remainder:
        return None

    last_import = current[-1] if current else None
    relation = Relation.DEFAULT
    position = 0
    if last_import is not None and last_import.next_sibling_start is not None:
        relation = Relation.BEFORE
        position = last_import.next_sibling_start
    elif last_import is not None:
        relation = Relation.AFTER
        position = last_import.span.end

    text = ("\n" if relation is Relation.AFTER else "") + remainder + "\n" + ("\n" if relation is Relation.BEFORE else "")
    logger.debug("Inserting snippet code at %d (%s)", position, relation.value)
    return Edit(start=position, insert=text)
