"""Markdown extension routing code blocks and spans through a named highlighter.

Fenced blocks are rendered by a preprocessor that replaces Python-Markdown's
``fenced_code``. Inline spans and indented blocks are handled by a
treeprocessor that runs after ``attr_list`` so ``{: class="language-x" }``
annotations are visible.
"""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
import logging
import re
from typing import Any
from urllib.parse import parse_qsl
import xml.etree.ElementTree as ElementTree

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from .config import HighlighterOptions
from .exceptions import UnknownHighlighterError
from .highlighter import SpanKind, SyntaxHighlighter, escape_html
from .languages import resolve_language_configuration
from .registry import get_highlighter, normalise_name


logger = logging.getLogger(__name__)

_LANGUAGE_CLASS_PREFIX = "language-"
_HIGHLIGHTER_CLASS_PREFIX = "highlighter-"


def split_language(label: str | None) -> tuple[str | None, dict[str, str]]:
    """Split ``lang?key=value`` into the language and its per-block options."""
    if not label:
        return None, {}
    language, _, query = label.strip().partition("?")
    language = language.lstrip(".") or None
    return language, dict(parse_qsl(query, keep_blank_values=True))


def _unescape_code(text: str) -> str:
    # Inverse of markdown.util.code_escape, applied to code span text.
    return text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")


class HighlighterBridge:
    """Resolve the configured highlighter and invoke it with host options."""

    def __init__(
        self,
        md: Markdown,
        name: str | None,
        options: HighlighterOptions,
    ) -> None:
        self.md = md
        self.name = normalise_name(name) if name else None
        self.options = options
        self._highlighter: SyntaxHighlighter | None = None
        self._resolved = False

    @property
    def highlighter(self) -> SyntaxHighlighter | None:
        if not self._resolved:
            self._resolved = True
            if self.name:
                try:
                    self._highlighter = get_highlighter(self.name)
                except UnknownHighlighterError:
                    logger.warning(
                        "The configured syntax highlighter '%s' is not available.",
                        self.name,
                    )
        return self._highlighter

    @property
    def enabled(self) -> bool:
        return self.highlighter is not None

    def highlight(
        self,
        raw_text: str,
        language: str | None,
        kind: SpanKind,
        options: Mapping[str, Any],
    ) -> str | None:
        """Return highlighted markup, or ``None`` for the plain rendering."""
        highlighter = self.highlighter
        if highlighter is None:
            return None
        if language:
            resolve_language_configuration(language, options.get("tree_sitter_parsers_dir"))
        return highlighter(self.md, raw_text, language, kind, options)

    def block_html(
        self,
        code: str,
        label: str | None,
        extra_options: Mapping[str, Any] | None = None,
    ) -> str:
        """Render a code block to a complete HTML fragment."""
        language, block_options = split_language(label)
        options = {
            **self.options.for_kind(SpanKind.BLOCK),
            **(extra_options or {}),
            **block_options,
        }
        effective_language = language or options.get("default_lang")

        highlighted = self.highlight(code, effective_language, SpanKind.BLOCK, options)
        if highlighted is not None:
            classes = []
            if effective_language:
                classes.append(f"{_LANGUAGE_CLASS_PREFIX}{effective_language}")
            classes.append(f"{_HIGHLIGHTER_CLASS_PREFIX}{self.name}")
            return f'<div class="{escape(" ".join(classes))}">{highlighted}</div>'

        code_attr = ""
        if language:
            code_attr = f' class="{escape(_LANGUAGE_CLASS_PREFIX + language)}"'
        return f"<pre><code{code_attr}>{escape_html(code)}</code></pre>"


class _FencedCodePreprocessor(Preprocessor):
    """Replace ``~~~lang`` and ```` ```lang ```` fences with stashed HTML."""

    _FENCE_RE = re.compile(
        r"""
        (?P<fence>^(?:~{3,}|`{3,}))[ ]*    # opening fence
        (?P<label>[^\s`]*)[ ]*\n           # optional language and ?options
        (?P<code>.*?)(?<=\n)               # code body
        (?P=fence)[ ]*$                    # closing fence
        """,
        re.MULTILINE | re.DOTALL | re.VERBOSE,
    )

    def __init__(self, md: Markdown, bridge: HighlighterBridge) -> None:
        super().__init__(md)
        self.bridge = bridge

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)
        while True:
            match = self._FENCE_RE.search(text)
            if match is None:
                break
            html = self.bridge.block_html(match.group("code"), match.group("label"))
            placeholder = self.md.htmlStash.store(html)
            text = f"{text[: match.start()]}\n{placeholder}\n{text[match.end() :]}"
        return text.split("\n")


class _CodeTreeprocessor(Treeprocessor):
    """Highlight inline code spans and indented code blocks."""

    def __init__(self, md: Markdown, bridge: HighlighterBridge) -> None:
        super().__init__(md)
        self.bridge = bridge

    def run(self, root: ElementTree.Element) -> ElementTree.Element:  # type: ignore[override]
        if not self.bridge.enabled:
            return root

        parent_map: dict[ElementTree.Element, ElementTree.Element] = {}
        for parent in root.iter():
            for child in list(parent):
                parent_map[child] = parent

        for element in list(root.iter("code")):
            if len(element):
                continue
            parent = parent_map.get(element)
            if parent is not None and parent.tag == "pre":
                self._highlight_block(parent_map.get(parent), parent, element)
            else:
                self._highlight_span(element)
        return root

    def _highlight_span(self, element: ElementTree.Element) -> None:
        classes = (element.get("class") or "").split()
        language = next(
            (
                name[len(_LANGUAGE_CLASS_PREFIX) :]
                for name in classes
                if name.startswith(_LANGUAGE_CLASS_PREFIX)
            ),
            None,
        )
        options = self.bridge.options.for_kind(SpanKind.INLINE)
        effective_language = language or options.get("default_lang")

        raw_text = _unescape_code(element.text or "")
        highlighted = self.bridge.highlight(raw_text, effective_language, SpanKind.INLINE, options)
        if highlighted is None:
            return

        if language is None and effective_language:
            classes.append(f"{_LANGUAGE_CLASS_PREFIX}{effective_language}")
        classes.append(f"{_HIGHLIGHTER_CLASS_PREFIX}{self.bridge.name}")
        element.set("class", " ".join(classes))
        element.text = self.md.htmlStash.store(highlighted)

    def _highlight_block(
        self,
        container: ElementTree.Element | None,
        pre: ElementTree.Element,
        element: ElementTree.Element,
    ) -> None:
        if container is None:
            return
        html = self.bridge.block_html(_unescape_code(element.text or ""), None)
        replacement = ElementTree.Element("p")
        replacement.text = self.md.htmlStash.store(html)
        replacement.tail = pre.tail
        for index, child in enumerate(list(container)):
            if child is pre:
                container.insert(index, replacement)
                container.remove(pre)
                return


class SyntaxHighlightExtension(Extension):
    """Register the code preprocessor and treeprocessor."""

    def __init__(self, **kwargs: Any) -> None:
        self.config = {
            "syntax_highlighter": [
                "",
                "Name of the registered syntax highlighter; empty disables highlighting.",
            ],
            "syntax_highlighter_opts": [
                {},
                "Options forwarded to the syntax highlighter.",
            ],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        md.registerExtension(self)
        bridge = HighlighterBridge(
            md,
            name=self.getConfig("syntax_highlighter") or None,
            options=HighlighterOptions.coerce(self.getConfig("syntax_highlighter_opts")),
        )
        md.preprocessors.register(
            _FencedCodePreprocessor(md, bridge), "syntax_highlight_fenced", priority=26
        )
        md.treeprocessors.register(
            _CodeTreeprocessor(md, bridge), "syntax_highlight_code", priority=7
        )


def makeExtension(  # noqa: N802 - Markdown expects this entry point name
    **kwargs: Any,
) -> SyntaxHighlightExtension:  # pragma: no cover - entry point
    return SyntaxHighlightExtension(**kwargs)


__all__ = ["HighlighterBridge", "SyntaxHighlightExtension", "makeExtension", "split_language"]
