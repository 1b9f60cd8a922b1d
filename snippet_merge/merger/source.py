"""
Parsed source text.

Wraps tree-sitter and tree-sitter-python so the rest of the merger sees a
text, its syntax tree, and a way to turn tree byte offsets into character
positions in the text.
"""

from __future__ import annotations

import tree_sitter_python as tspython
from tree_sitter import Language, Node, Parser, Tree

PY_LANGUAGE = Language(tspython.language())


def make_parser() -> Parser:
    """Create a tree-sitter parser for Python."""
    return Parser(PY_LANGUAGE)


class SourceDocument:
    """A read-only snapshot of a source text and its syntax tree.

    tree-sitter reports UTF-8 byte offsets. Edits produced by the merger are
    expressed in character offsets of ``text``, so every position read from
    the tree goes through :meth:`position`.
    """

    def __init__(self, text: str, tree: Tree | None = None, parser: Parser | None = None):
        """Initialize the document.

        Args:
            text: Full source text
            tree: Syntax tree for ``text``, parsed here if not given
            parser: Parser to use when ``tree`` is not given
        """
        self.text = text
        self.data = text.encode("utf-8")
        if tree is None:
            tree = (parser or make_parser()).parse(self.data)
        self.tree = tree
        # Byte and character offsets coincide for pure ASCII text
        self._ascii = len(self.data) == len(text)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def slice(self, start_byte: int, end_byte: int) -> str:
        """Read the text between two byte offsets."""
        return self.data[start_byte:end_byte].decode("utf-8")

    def node_text(self, node: Node) -> str:
        return self.slice(node.start_byte, node.end_byte)

    def position(self, byte_offset: int) -> int:
        """Convert a byte offset from the tree into a character offset."""
        if self._ascii:
            return byte_offset
        return len(self.data[:byte_offset].decode("utf-8"))
