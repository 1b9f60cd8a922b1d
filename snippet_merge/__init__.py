"""Snippet Merge

Merges snippets of generated Python code into existing source without
disturbing it: imports are deduplicated and consolidated into the existing
import block, and the remaining code is placed right after that block.
"""

__version__ = "1.0.0"

from .config import AliasStrategy, MergeConfig, OutputConfig
from .merger import (
    AliasesNotSupportedError,
    AtomicWriter,
    Edit,
    MergeResult,
    PythonSnippetMerger,
    SnippetMergeError,
    SourceDocument,
    apply_edits,
    calculate_changes,
)
from .templates import SnippetRenderer

__all__ = [
    "PythonSnippetMerger",
    "calculate_changes",
    "apply_edits",
    "SourceDocument",
    "Edit",
    "MergeResult",
    "SnippetMergeError",
    "AliasesNotSupportedError",
    "AtomicWriter",
    "MergeConfig",
    "OutputConfig",
    "AliasStrategy",
    "SnippetRenderer",
]
