"""
Flattening of snippet imports into required imports.
"""

from __future__ import annotations

from collections.abc import Iterable

from .base import AliasesNotSupportedError
from .records import ImportKind, ImportRecord, RequiredImport


def to_required_imports(record: ImportRecord) -> list[RequiredImport]:
    """Flatten an import record into the imports it requires.

    Args:
        record: An import taken from a snippet

    Returns:
        One RequiredImport per imported name, or one for a module import

    Raises:
        AliasesNotSupportedError: If the record aliases anything
    """
    if record.kind is ImportKind.FROM:
        required = []
        for imported in record.names or []:
            if imported.alias:
                raise AliasesNotSupportedError(f"{record.module}.{imported.name}", imported.alias)
            required.append(RequiredImport(module=record.module, name=imported.name))
        return required

    if record.alias:
        raise AliasesNotSupportedError(record.module, record.alias)
    return [RequiredImport(module=record.module)]


def flatten_required_imports(records: Iterable[ImportRecord]) -> list[RequiredImport]:
    """Flatten several records in order, stopping at the first alias.

    Repeats are dropped: every requirement is planned against the same
    snapshot of the buffer, so a repeat would be added twice.
    """
    required: list[RequiredImport] = []
    for record in records:
        for requirement in to_required_imports(record):
            if requirement not in required:
                required.append(requirement)
    return required
