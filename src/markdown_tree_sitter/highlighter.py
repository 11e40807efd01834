"""Tree-sitter highlight adapter.

The adapter does not analyse code yet. It escapes the reserved HTML
characters of a fragment so the host can embed it verbatim, and wraps block
fragments in a ``<pre><code>`` container. Language labels and options are
part of the host call shape but are not inspected here.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from html import escape
from typing import Any, Protocol


BLOCK_OPEN = "<pre><code>"
BLOCK_CLOSE = "</code></pre>"


class SpanKind(str, Enum):
    """Where a code fragment was found in the document."""

    BLOCK = "block"
    INLINE = "inline"

    @classmethod
    def _missing_(cls, value: object) -> SpanKind | None:
        # kramdown-style hosts call inline code a "span".
        if isinstance(value, str) and value.strip().lower() == "span":
            return cls.INLINE
        return None


class SyntaxHighlighter(Protocol):
    """Callable shape the host uses to invoke a registered highlighter.

    Implementations return HTML that is safe to embed verbatim, or ``None``
    to let the host fall back to its unhighlighted rendering.
    """

    def __call__(
        self,
        md: Any,
        raw_text: str,
        language: str | None,
        kind: SpanKind,
        options: Mapping[str, Any],
    ) -> str | None: ...


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; quotes are left alone."""
    return escape(text, quote=False)


class TreeSitterHighlighter:
    """Escape-and-wrap highlighter registered under ``tree-sitter``."""

    name = "tree-sitter"

    def render(self, fragment: str, kind: SpanKind | str) -> str:
        """Return the HTML-safe markup for ``fragment``."""
        rendered = escape_html(fragment)
        if SpanKind(kind) is SpanKind.BLOCK:
            return f"{BLOCK_OPEN}{rendered}{BLOCK_CLOSE}"
        return rendered

    def __call__(
        self,
        md: Any,
        raw_text: str,
        language: str | None,
        kind: SpanKind | str,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        del md, language, options
        return self.render(raw_text, kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = [
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "SpanKind",
    "SyntaxHighlighter",
    "TreeSitterHighlighter",
    "escape_html",
]
