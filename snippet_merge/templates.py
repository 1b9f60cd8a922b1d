"""
Snippet templates.

Snippets are often produced from templates; this renders them with jinja2
before they are merged.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .merger.base import TemplateRenderError

TEMPLATE_SUFFIXES = (".jinja2", ".j2")


def is_template_path(path: str | Path) -> bool:
    return Path(path).suffix in TEMPLATE_SUFFIXES


class SnippetRenderer:
    """Renders snippet templates.

    Undefined variables are errors: a snippet with a silently empty name
    would still merge, but as broken code.
    """

    def __init__(self):
        self.jinja_env = jinja2.Environment(
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
        )

    def render(self, text: str, variables: dict[str, str] | None = None) -> str:
        """Render a snippet template.

        Args:
            text: Template source
            variables: Values for the template variables

        Returns:
            The rendered snippet

        Raises:
            TemplateRenderError: If the template is invalid or uses an undefined variable
        """
        try:
            return self.jinja_env.from_string(text).render(**(variables or {}))
        except jinja2.TemplateError as e:
            raise TemplateRenderError(f"Failed to render snippet template: {e}") from e
