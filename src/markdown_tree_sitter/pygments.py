"""Pygments integration helpers for HTML rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import ClassNotFound, TextLexer, get_lexer_by_name

from .highlighter import SpanKind


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _is_enabled(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


class PygmentsHighlighter:
    """Convert source code to classed HTML using Pygments."""

    name = "pygments"

    def __init__(self, *, css_class: str = "highlight") -> None:
        self.css_class = css_class

    def _lexer(self, language: str | None) -> Lexer | None:
        if not language:
            return None
        try:
            return get_lexer_by_name(language, stripnl=False)
        except ClassNotFound:
            return None

    def __call__(
        self,
        md: Any,
        raw_text: str,
        language: str | None,
        kind: SpanKind | str,
        options: Mapping[str, Any] | None = None,
    ) -> str | None:
        del md
        options = options or {}
        language = language or options.get("default_lang")
        lexer = self._lexer(language)

        if SpanKind(kind) is SpanKind.INLINE:
            if lexer is None:
                return None
            tokens = highlight(raw_text, lexer, HtmlFormatter(nowrap=True))
            if tokens.endswith("\n") and not raw_text.endswith("\n"):
                tokens = tokens[:-1]
            return tokens

        lexer = lexer or TextLexer(stripnl=False)
        if _is_enabled(options.get("line_numbers", False)):
            formatter = HtmlFormatter(linenos="table", cssclass=self.css_class)
            return highlight(raw_text, lexer, formatter)

        tokens = highlight(raw_text, lexer, HtmlFormatter(nowrap=True))
        return (
            f'<div class="{self.css_class}"><pre class="{self.css_class}"><code>'
            f"{tokens}</code></pre></div>"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(css_class={self.css_class!r})"


__all__ = ["PygmentsHighlighter"]
