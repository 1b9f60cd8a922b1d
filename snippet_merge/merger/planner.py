"""
Import merge planning.

Works out the smallest edit that makes the buffer satisfy a required import,
leaving every existing import untouched.
"""

from __future__ import annotations

import logging

from .base import Edit
from .records import WILDCARD, ImportKind, ImportRecord, RequiredImport

logger = logging.getLogger(__name__)

# In-place extensions start with this; appended statements never do
EXTENSION_PREFIX = ", "


def plan_import_edits(current: list[ImportRecord], required: RequiredImport) -> list[Edit]:
    """Compute the edits needed for the buffer to provide ``required``.

    Args:
        current: Top-level imports of the buffer, in source order
        required: The import to provide

    Returns:
        An empty list if the import is already present, otherwise one edit
    """
    if required.name is None:
        satisfied = any(c.kind is ImportKind.MODULE and c.module == required.module and not c.alias for c in current)
        return _satisfied(required) if satisfied else [_append(current, required)]

    if required.name == WILDCARD:
        satisfied = any(c.kind is ImportKind.FROM and c.module == required.module and c.is_wildcard for c in current)
        return _satisfied(required) if satisfied else [_append(current, required)]

    partial_matches = [c for c in current if c.kind is ImportKind.FROM and c.module == required.module and not c.is_wildcard]
    if any(c.binds(required.name) for c in partial_matches):
        return _satisfied(required)
    if partial_matches:
        # Always the first statement so repeated merges extend the same line
        target = partial_matches[0]
        logger.debug("Extending 'from %s import' at %d with %s", required.module, target.names_end, required.name)
        return [Edit(start=target.names_end, end=target.names_end, insert=f"{EXTENSION_PREFIX}{required.name}")]
    return [_append(current, required)]


def is_extension(edit: Edit) -> bool:
    """Whether ``edit`` adds a name to an existing from-import."""
    return edit.insert.startswith(EXTENSION_PREFIX)


def append_position(current: list[ImportRecord]) -> int:
    """Position where new import statements go: after the last import, or 0."""
    return current[-1].span.end if current else 0


def _append(current: list[ImportRecord], required: RequiredImport) -> Edit:
    position = append_position(current)
    prefix = "\n" if position > 0 else ""
    logger.debug("Adding '%s' at %d", required.render(), position)
    return Edit(start=position, end=position, insert=prefix + required.render())


def _satisfied(required: RequiredImport) -> list[Edit]:
    logger.debug("'%s' already satisfied", required.render())
    return []
