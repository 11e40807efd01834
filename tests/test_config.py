from __future__ import annotations

from pathlib import Path

import pytest

from markdown_tree_sitter.config import HighlighterOptions
from markdown_tree_sitter.exceptions import HighlighterConfigError
from markdown_tree_sitter.highlighter import SpanKind


def test_defaults() -> None:
    options = HighlighterOptions.coerce(None)

    assert options.default_lang is None
    assert options.tree_sitter_parsers_dir is None
    assert options.for_kind(SpanKind.BLOCK) == {
        "default_lang": None,
        "tree_sitter_parsers_dir": None,
    }


def test_coerce_returns_existing_instance() -> None:
    options = HighlighterOptions(default_lang="python")

    assert HighlighterOptions.coerce(options) is options


def test_per_kind_sections_override_top_level() -> None:
    options = HighlighterOptions.coerce(
        {
            "default_lang": "python",
            "css_class": "code",
            "block": {"line_numbers": True},
            "span": {"default_lang": "ruby", "css_class": "inline"},
        }
    )

    block = options.for_kind(SpanKind.BLOCK)
    span = options.for_kind("span")

    assert block["default_lang"] == "python"
    assert block["css_class"] == "code"
    assert block["line_numbers"] is True
    assert "block" not in block and "span" not in block
    assert span["default_lang"] == "ruby"
    assert span["css_class"] == "inline"
    assert "line_numbers" not in span


def test_parsers_dir_is_a_user_expanded_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    options = HighlighterOptions.coerce({"tree_sitter_parsers_dir": "~/parsers"})

    assert options.tree_sitter_parsers_dir == tmp_path / "parsers"


def test_blank_default_language_is_ignored() -> None:
    assert HighlighterOptions.coerce({"default_lang": "  "}).default_lang is None


def test_invalid_options_raise_config_error() -> None:
    with pytest.raises(HighlighterConfigError, match="Invalid highlighter options"):
        HighlighterOptions.coerce({"block": "not a mapping"})


def test_non_mapping_options_raise_config_error() -> None:
    with pytest.raises(HighlighterConfigError, match="must be a mapping"):
        HighlighterOptions.coerce(["default_lang", "python"])  # type: ignore[arg-type]
