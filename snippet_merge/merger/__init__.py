"""
Import-aware merging of Python snippets into existing source.

Splits a snippet into its imports and the rest, merges the imports into the
buffer's import block with minimal edits, and places the rest after it.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import AliasesNotSupportedError, Edit, EditConflictError, MergeResult, SnippetMergeError, TemplateRenderError
from .edits import apply_edits
from .extractor import extract_imports
from .planner import plan_import_edits
from .python_merger import PythonSnippetMerger, calculate_changes
from .records import ImportedName, ImportKind, ImportRecord, RequiredImport, Span
from .requirements import flatten_required_imports, to_required_imports
from .source import SourceDocument

__all__ = [
    "AliasesNotSupportedError",
    "AtomicWriter",
    "Edit",
    "EditConflictError",
    "ImportKind",
    "ImportRecord",
    "ImportedName",
    "MergeResult",
    "PythonSnippetMerger",
    "RequiredImport",
    "SnippetMergeError",
    "SourceDocument",
    "Span",
    "TemplateRenderError",
    "apply_edits",
    "calculate_changes",
    "extract_imports",
    "flatten_required_imports",
    "plan_import_edits",
    "to_required_imports",
]
