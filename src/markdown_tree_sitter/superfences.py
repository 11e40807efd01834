"""Formatters exposing registered highlighters to ``pymdownx.superfences``.

Use them in ``custom_fences`` and ``pymdownx.inlinehilite``'s
``custom_inline`` configuration::

    extension_configs = {
        "pymdownx.superfences": {
            "custom_fences": custom_fences("source.python"),
        },
    }
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from html import escape
from typing import Any

from .config import HighlighterOptions
from .extension import HighlighterBridge
from .highlighter import SpanKind, escape_html


FenceFormatter = Callable[..., str]
InlineFormatter = Callable[..., str]


def make_fence_formatter(highlighter: str = "tree-sitter", **options: Any) -> FenceFormatter:
    """Return a superfences custom fence formatter bound to ``highlighter``."""
    settings = HighlighterOptions.coerce(options)

    def formatter(
        source: str,
        language: str,
        class_name: str,
        options: Mapping[str, Any] | None,
        md: Any,
        **kwargs: Any,
    ) -> str:
        del class_name, kwargs
        bridge = HighlighterBridge(md, highlighter, settings)
        return bridge.block_html(source, language, extra_options=options)

    return formatter


def make_inline_formatter(highlighter: str = "tree-sitter", **options: Any) -> InlineFormatter:
    """Return an inlinehilite custom inline formatter bound to ``highlighter``."""
    settings = HighlighterOptions.coerce(options)

    def formatter(src: str, language: str, class_name: str, md: Any) -> str:
        del class_name
        bridge = HighlighterBridge(md, highlighter, settings)
        span_options = settings.for_kind(SpanKind.INLINE)
        effective_language = language or span_options.get("default_lang")

        classes: list[str] = []
        if effective_language:
            classes.append(f"language-{effective_language}")
        highlighted = bridge.highlight(src, effective_language, SpanKind.INLINE, span_options)
        if highlighted is None:
            highlighted = escape_html(src)
        else:
            classes.append(f"highlighter-{bridge.name}")

        class_attr = f' class="{escape(" ".join(classes))}"' if classes else ""
        return f"<code{class_attr}>{highlighted}</code>"

    return formatter


def custom_fences(
    *names: str,
    highlighter: str = "tree-sitter",
    **options: Any,
) -> list[dict[str, Any]]:
    """Build ``custom_fences`` entries routing ``names`` to ``highlighter``."""
    formatter = make_fence_formatter(highlighter, **options)
    return [{"name": name, "class": name, "format": formatter} for name in names]


def custom_inline(
    *names: str,
    highlighter: str = "tree-sitter",
    **options: Any,
) -> list[dict[str, Any]]:
    """Build ``custom_inline`` entries routing ``names`` to ``highlighter``."""
    formatter = make_inline_formatter(highlighter, **options)
    return [{"name": name, "class": name, "format": formatter} for name in names]


fence_format = make_fence_formatter()
inline_format = make_inline_formatter()


__all__ = [
    "custom_fences",
    "custom_inline",
    "fence_format",
    "inline_format",
    "make_fence_formatter",
    "make_inline_formatter",
]
