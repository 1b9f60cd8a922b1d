"""
Tests for placing the non-import part of a snippet.
"""

from __future__ import annotations

from snippet_merge.merger import Edit, SourceDocument, extract_imports
from snippet_merge.merger.insertion import plan_remainder_edit, separate_import_block


def current(buffer: str):
    return extract_imports(SourceDocument(buffer))


class TestPlanRemainderEdit:
    """Tests for plan_remainder_edit."""

    def test_nothing_to_insert(self):
        assert plan_remainder_edit("", current("import os\n")) is None

    def test_before_statement_following_imports(self):
        assert plan_remainder_edit("foo()", current("import os\n\nx = 1\n")) == Edit(11, None, "foo()\n\n")

    def test_after_last_import_at_end_of_buffer(self):
        assert plan_remainder_edit("foo()", current("import os\n")) == Edit(9, None, "\nfoo()\n")

    def test_start_of_buffer_without_imports(self):
        assert plan_remainder_edit("foo()", current("")) == Edit(0, None, "foo()\n")
        assert plan_remainder_edit("foo()", current("x = 1\n")) == Edit(0, None, "foo()\n")

    def test_uses_last_import(self):
        buffer = "import os\nx = 1\nimport sys\ny = 2\n"
        assert plan_remainder_edit("foo()", current(buffer)) == Edit(buffer.index("y ="), None, "foo()\n\n")

    def test_after_trailing_comment(self):
        buffer = "import os  # system\n"
        assert plan_remainder_edit("foo()", current(buffer)) == Edit(19, None, "\nfoo()\n")


class TestSeparateImportBlock:
    """Tests for separate_import_block."""

    def test_single_import_gets_blank_line(self):
        edits = [Edit(0, 0, "import os")]
        separate_import_block(edits, [])
        assert edits == [Edit(0, 0, "import os\n\n")]

    def test_every_line_is_terminated(self):
        edits = [Edit(0, 0, "import os"), Edit(0, 0, "import sys")]
        separate_import_block(edits, [])
        assert [e.insert for e in edits] == ["import os\n", "import sys\n\n"]

    def test_buffer_with_imports_is_untouched(self):
        edits = [Edit(9, 9, "\nimport sys")]
        separate_import_block(edits, current("import os\n"))
        assert edits == [Edit(9, 9, "\nimport sys")]

    def test_no_edits(self):
        edits = []
        separate_import_block(edits, [])
        assert edits == []
