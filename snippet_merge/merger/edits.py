"""
Application of edit lists.

Edits are positioned in the coordinates of the text they were computed from
and are applied together, the way an editor applies a single transaction.
"""

from __future__ import annotations

from .base import Edit, EditConflictError


def apply_edits(text: str, edits: list[Edit]) -> str:
    """Apply all edits to ``text`` at once.

    Edits at the same position are applied in list order, so an insertion
    listed first ends up first in the result.

    Args:
        text: The text the edits were computed against
        edits: Edits in any order

    Returns:
        The edited text

    Raises:
        EditConflictError: If edits overlap or fall outside the text
    """
    ordered = sorted(edits, key=lambda e: e.start)  # stable
    parts = []
    cursor = 0
    for edit in ordered:
        end = edit.start if edit.end is None else edit.end
        if edit.start < cursor or end < edit.start or end > len(text):
            raise EditConflictError(f"Edit {edit.to_dict()} overlaps a previous edit or is outside the text (length {len(text)})")
        parts.append(text[cursor : edit.start])
        parts.append(edit.insert)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)
