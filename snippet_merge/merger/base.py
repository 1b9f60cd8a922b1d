"""
Errors and edit types shared by the snippet merger.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class SnippetMergeError(Exception):
    """Raised when a snippet cannot be merged into a buffer.

    This can happen when:
    - The snippet contains aliased imports
    - An edit list cannot be applied to the text
    - The snippet template fails to render
    - Validation of the merged output fails
    """

    pass


class AliasesNotSupportedError(SnippetMergeError):
    """Raised when the incoming snippet contains an aliased import.

    Synthesized code is expected to import names under their own names.
    An alias means the snippet cannot be merged safely, so the whole merge
    is aborted rather than partially applied.
    """

    def __init__(self, name: str, alias: str):
        self.name = name
        self.alias = alias
        super().__init__(f"Aliased imports are not supported in snippets: '{name}' imported as '{alias}'")


class EditConflictError(SnippetMergeError):
    """Raised when edits overlap or fall outside the text they target."""

    pass


class TemplateRenderError(SnippetMergeError):
    """Raised when a snippet template fails to render."""

    pass


@dataclass
class Edit:
    """A single change to a text.

    Attributes:
        start: Character offset where the change begins
        end: Character offset where replaced text ends (None for a pure insertion)
        insert: Text inserted at start
    """

    start: int
    end: int | None = None
    insert: str = ""

    @property
    def is_insertion(self) -> bool:
        return self.end is None or self.end == self.start

    def to_dict(self) -> dict:
        """Convert to the {from, to, insert} form used by editor transactions."""
        d: dict = {"from": self.start, "insert": self.insert}
        if self.end is not None:
            d["to"] = self.end
        return d


@dataclass
class MergeResult:
    """Outcome of a merge that does not raise.

    Attributes:
        edits: Edits to apply to the buffer (empty on failure)
        error: The alias rejection, if the snippet could not be merged
    """

    edits: list[Edit] = field(default_factory=list)
    error: AliasesNotSupportedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
