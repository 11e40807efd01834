from __future__ import annotations

import pytest

from markdown_tree_sitter.highlighter import SpanKind
from markdown_tree_sitter.pygments import PygmentsHighlighter


@pytest.fixture
def highlighter() -> PygmentsHighlighter:
    return PygmentsHighlighter()


def test_block_uses_lexer_tokens(highlighter: PygmentsHighlighter) -> None:
    html = highlighter(None, "print('Hello, World!')\n", "python", SpanKind.BLOCK, {})

    assert html is not None
    assert html.startswith('<div class="highlight"><pre class="highlight"><code>')
    assert '<span class="nb">print</span>' in html
    assert html.endswith("\n</code></pre></div>")


def test_block_with_unknown_language_is_plain_escaped_text(
    highlighter: PygmentsHighlighter,
) -> None:
    html = highlighter(None, "a < b\n", "no-such-language", SpanKind.BLOCK, {})

    assert html == '<div class="highlight"><pre class="highlight"><code>a &lt; b\n</code></pre></div>'


def test_block_default_language_option(highlighter: PygmentsHighlighter) -> None:
    html = highlighter(None, "print(1)\n", None, SpanKind.BLOCK, {"default_lang": "python"})

    assert html is not None
    assert '<span class="nb">print</span>' in html


def test_block_line_numbers(highlighter: PygmentsHighlighter) -> None:
    html = highlighter(None, "x = 1\ny = 2\n", "python", SpanKind.BLOCK, {"line_numbers": "true"})

    assert html is not None
    assert 'class="highlighttable"' in html


def test_inline_without_language_is_declined(highlighter: PygmentsHighlighter) -> None:
    assert highlighter(None, "x", None, SpanKind.INLINE, {}) is None
    assert highlighter(None, "x", "no-such-language", SpanKind.INLINE, {}) is None


def test_inline_strips_added_newline(highlighter: PygmentsHighlighter) -> None:
    html = highlighter(None, "print(1)", "python", SpanKind.INLINE, {})

    assert html is not None
    assert not html.endswith("\n")
    assert html.startswith('<span class="nb">print</span>')


def test_custom_css_class() -> None:
    html = PygmentsHighlighter(css_class="code")(None, "x\n", "text", "block", {})

    assert html == '<div class="code"><pre class="code"><code>x\n</code></pre></div>'
