from __future__ import annotations

from pathlib import Path

import markdown
import pytest

from markdown_tree_sitter.exceptions import LanguageNotFoundError
from markdown_tree_sitter.superfences import (
    custom_fences,
    custom_inline,
    fence_format,
    inline_format,
    make_fence_formatter,
    make_inline_formatter,
)


def test_fence_format_matches_block_markup() -> None:
    html = fence_format("<b>&</b>\n", "text.html.basic", "text.html.basic", {}, None)

    assert html == (
        '<div class="language-text.html.basic highlighter-tree-sitter">'
        "<pre><code>&lt;b&gt;&amp;&lt;/b&gt;\n</code></pre></div>"
    )


def test_fence_format_accepts_superfences_keyword_arguments() -> None:
    html = fence_format(
        "x",
        "source.python",
        "source.python",
        {},
        None,
        classes=["extra"],
        id_value="",
        attrs={},
    )

    assert html == (
        '<div class="language-source.python highlighter-tree-sitter"><pre><code>x</code></pre></div>'
    )


def test_inline_format_matches_span_markup() -> None:
    html = inline_format("a < b", "source.python", "source.python", None)

    assert html == '<code class="language-source.python highlighter-tree-sitter">a &lt; b</code>'


def test_inline_formatter_falls_back_when_highlighter_declines() -> None:
    formatter = make_inline_formatter("pygments")

    assert formatter("a < b", "", "", None) == "<code>a &lt; b</code>"


def test_formatters_validate_parsers_dir(tmp_path: Path) -> None:
    formatter = make_fence_formatter(tree_sitter_parsers_dir=tmp_path / "missing")

    with pytest.raises(LanguageNotFoundError):
        formatter("x\n", "source.python", "source.python", {}, None)


def test_custom_entries_share_one_formatter() -> None:
    fences = custom_fences("source.python", "text.html.basic")
    inline = custom_inline("source.python")

    assert [entry["name"] for entry in fences] == ["source.python", "text.html.basic"]
    assert fences[0]["class"] == "source.python"
    assert fences[0]["format"] is fences[1]["format"]
    assert inline[0]["name"] == "source.python"
    assert callable(inline[0]["format"])


def test_superfences_custom_fence_end_to_end() -> None:
    pytest.importorskip("pymdownx.superfences")

    html = markdown.markdown(
        "~~~source.python\nprint('<ok>')\n~~~\n",
        extensions=["pymdownx.superfences"],
        extension_configs={
            "pymdownx.superfences": {"custom_fences": custom_fences("source.python")},
        },
    )

    assert 'class="language-source.python highlighter-tree-sitter"' in html
    assert "print('&lt;ok&gt;')" in html
