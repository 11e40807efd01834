"""Python-Markdown syntax highlighter adapter named ``tree-sitter``."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .config import HighlighterOptions
from .exceptions import (
    HighlighterConfigError,
    HighlighterError,
    HighlighterRegistrationError,
    LanguageNotFoundError,
    UnknownHighlighterError,
)
from .extension import SyntaxHighlightExtension, makeExtension
from .highlighter import SpanKind, SyntaxHighlighter, TreeSitterHighlighter, escape_html
from .languages import LanguageConfiguration, resolve_language_configuration
from .pygments import PygmentsHighlighter
from .registry import (
    available_highlighters,
    get_highlighter,
    register_highlighter,
    unregister_highlighter,
)


try:
    __version__ = _pkg_version("markdown-tree-sitter")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "HighlighterConfigError",
    "HighlighterError",
    "HighlighterOptions",
    "HighlighterRegistrationError",
    "LanguageConfiguration",
    "LanguageNotFoundError",
    "PygmentsHighlighter",
    "SpanKind",
    "SyntaxHighlightExtension",
    "SyntaxHighlighter",
    "TreeSitterHighlighter",
    "UnknownHighlighterError",
    "__version__",
    "available_highlighters",
    "escape_html",
    "get_highlighter",
    "makeExtension",
    "register_highlighter",
    "resolve_language_configuration",
    "unregister_highlighter",
]
