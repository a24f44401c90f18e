"""Markdown rendering for AI-authored text shown on the page.

Generated questions, options and explanations routinely contain inline code
(``kubectl get pods``) and fenced snippets, so everything the model writes is
rendered as CommonMark before it reaches the browser. Raw HTML in the source
is escaped, never passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into a block-level HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line (e.g. an answer option) without wrapping <p> tags."""

        return self._markdown.renderInline(markdown_text.strip())


# MarkdownIt is safe for concurrent read-only renders.
renderer = MarkdownRenderer()
