"""
Tests for atomic writing of merged files.
"""

from __future__ import annotations

import pytest

from snippet_merge.merger import AtomicWriter, SnippetMergeError


class TestAtomicWriter:
    """Tests for AtomicWriter."""

    def test_atomic_write_creates_file(self, tmp_path):
        """Test that atomic write creates the target file."""
        target = tmp_path / "module.py"
        AtomicWriter().write(target, "import os\n")
        assert target.read_text() == "import os\n"

    def test_atomic_write_creates_parent_directories(self, tmp_path):
        target = tmp_path / "pkg" / "sub" / "module.py"
        AtomicWriter().write(target, "x = 1\n")
        assert target.read_text() == "x = 1\n"

    def test_atomic_write_replaces_existing_file(self, tmp_path):
        target = tmp_path / "module.py"
        target.write_text("old = 1\n")
        AtomicWriter().write(target, "new = 1\n")
        assert target.read_text() == "new = 1\n"

    def test_invalid_python_leaves_target_untouched(self, tmp_path):
        """Test that a failed validation keeps the old file and removes the temp file."""
        target = tmp_path / "module.py"
        target.write_text("old = 1\n")

        with pytest.raises(SnippetMergeError):
            AtomicWriter().write(target, "def broken(:\n")

        assert target.read_text() == "old = 1\n"
        assert [p.name for p in tmp_path.iterdir()] == ["module.py"]

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "module.py"
        AtomicWriter().write(target, "def broken(:\n", validate=False)
        assert target.read_text() == "def broken(:\n"

    def test_custom_validator(self, tmp_path):
        def reject_prints(content):
            if "print" in content:
                raise SnippetMergeError("no prints")

        writer = AtomicWriter(validate_python=reject_prints)
        with pytest.raises(SnippetMergeError, match="no prints"):
            writer.write(tmp_path / "module.py", "print(1)\n")
        assert not (tmp_path / "module.py").exists()
