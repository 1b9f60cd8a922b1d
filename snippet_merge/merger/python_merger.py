"""
Python snippet merger.

Uses tree-sitter to parse both the buffer and the snippet, merges the
snippet's imports into the buffer's import block, and places the rest of
the snippet right after that block.
"""

from __future__ import annotations

import logging

from .base import AliasesNotSupportedError, Edit, MergeResult
from .edits import apply_edits
from .extractor import extract_imports
from .insertion import plan_remainder_edit, separate_import_block
from .planner import is_extension, plan_import_edits
from .requirements import flatten_required_imports
from .source import SourceDocument, make_parser

logger = logging.getLogger(__name__)


class PythonSnippetMerger:
    """Merger for Python snippets using tree-sitter.

    An instance owns a tree-sitter parser and must not be shared between
    threads. Each call reads a snapshot of the buffer; the returned edits are
    only valid for that exact text.
    """

    def __init__(self):
        self._parser = make_parser()

    def parse(self, code: str) -> SourceDocument:
        """Parse Python source into a document.

        Parsing never fails: tree-sitter produces a tree for any input, and
        statements it could not make sense of simply do not count as imports.
        """
        return SourceDocument(code, parser=self._parser)

    def calculate_changes(self, buffer: SourceDocument | str, snippet: str) -> list[Edit]:
        """Calculate the changes needed to insert ``snippet`` into the buffer.

        Imports are separated and merged with existing imports. The remaining
        code (if any) is inserted before the first non-import code.

        Args:
            buffer: The current buffer, parsed or as text
            snippet: The Python code to add

        Returns:
            Edits in buffer coordinates, in production order

        Raises:
            AliasesNotSupportedError: If the snippet contains aliased imports
        """
        if isinstance(buffer, str):
            buffer = self.parse(buffer)

        snippet_doc = self.parse(snippet)
        snippet_imports = extract_imports(snippet_doc)
        end_of_imports = snippet_imports[-1].span.end if snippet_imports else 0
        remainder = snippet[end_of_imports:].strip()
        required = flatten_required_imports(snippet_imports)

        current = extract_imports(buffer)
        extensions: list[Edit] = []
        appends: list[Edit] = []
        for requirement in required:
            for edit in plan_import_edits(current, requirement):
                (extensions if is_extension(edit) else appends).append(edit)
        # An extension of the last import shares its position with the appends
        # and must land on that import, not on a newly added line
        changes = extensions + appends
        separate_import_block(changes, current)

        remainder_edit = plan_remainder_edit(remainder, current)
        if remainder_edit is not None:
            changes.append(remainder_edit)

        logger.debug("Planned %d edits for %d required imports", len(changes), len(required))
        return changes

    def calculate_raw_changes(self, buffer: SourceDocument | str, snippet: str) -> list[Edit]:
        """Place the whole snippet, imports included, without merging anything.

        Used as a fallback for snippets the merge rejects.
        """
        if isinstance(buffer, str):
            buffer = self.parse(buffer)
        edit = plan_remainder_edit(snippet.strip(), extract_imports(buffer))
        return [edit] if edit is not None else []

    def merge_snippet(self, buffer: SourceDocument | str, snippet: str) -> MergeResult:
        """Like :meth:`calculate_changes`, but reports alias rejection as a result."""
        try:
            return MergeResult(edits=self.calculate_changes(buffer, snippet))
        except AliasesNotSupportedError as e:
            logger.debug("Snippet rejected: %s", e)
            return MergeResult(error=e)

    def merge_text(self, buffer_text: str, snippet: str) -> str:
        """Merge ``snippet`` into ``buffer_text`` and return the resulting text.

        Raises:
            AliasesNotSupportedError: If the snippet contains aliased imports
        """
        return apply_edits(buffer_text, self.calculate_changes(buffer_text, snippet))


def calculate_changes(buffer: SourceDocument | str, snippet: str) -> list[Edit]:
    """Convenience function using a fresh :class:`PythonSnippetMerger`."""
    return PythonSnippetMerger().calculate_changes(buffer, snippet)
