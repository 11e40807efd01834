"""Central registry mapping highlighter names to callables.

The host side of the integration looks highlighters up by name here. The
bundled ``tree-sitter`` and ``pygments`` highlighters are registered on
import; installed distributions can contribute more through the
``markdown_tree_sitter.highlighters`` entry-point group.
"""

from __future__ import annotations

from importlib import metadata
import logging
from threading import Lock

from .exceptions import HighlighterRegistrationError, UnknownHighlighterError
from .highlighter import SyntaxHighlighter, TreeSitterHighlighter
from .pygments import PygmentsHighlighter


logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "markdown_tree_sitter.highlighters"

_HIGHLIGHTERS: dict[str, SyntaxHighlighter] = {}
_REGISTRY_GUARD = Lock()
_entry_points_loaded = False


def normalise_name(name: str) -> str:
    """Return the lookup key for a highlighter name."""
    return name.strip().lower().replace("_", "-")


def register_highlighter(
    name: str,
    highlighter: SyntaxHighlighter,
    *,
    replace: bool = False,
) -> None:
    """Register ``highlighter`` under ``name``."""
    if not callable(highlighter):
        raise HighlighterRegistrationError(
            f"Highlighter '{name}' must be callable, got {type(highlighter).__name__}."
        )
    key = normalise_name(name)
    if not key:
        raise HighlighterRegistrationError("Highlighter names must not be empty.")
    with _REGISTRY_GUARD:
        if key in _HIGHLIGHTERS and not replace:
            raise HighlighterRegistrationError(
                f"A syntax highlighter named '{key}' is already registered."
            )
        _HIGHLIGHTERS[key] = highlighter
    logger.debug("registered syntax highlighter %s: %r", key, highlighter)


def unregister_highlighter(name: str) -> SyntaxHighlighter:
    """Remove and return the highlighter registered under ``name``."""
    key = normalise_name(name)
    with _REGISTRY_GUARD:
        try:
            highlighter = _HIGHLIGHTERS.pop(key)
        except KeyError as exc:
            raise UnknownHighlighterError(name) from exc
    logger.debug("unregistered syntax highlighter %s", key)
    return highlighter


def _load_entry_points() -> None:
    global _entry_points_loaded

    with _REGISTRY_GUARD:
        if _entry_points_loaded:
            return
        _entry_points_loaded = True

    for entry_point in metadata.entry_points().select(group=ENTRY_POINT_GROUP):
        key = normalise_name(entry_point.name)
        with _REGISTRY_GUARD:
            if key in _HIGHLIGHTERS:
                continue
        try:
            loaded = entry_point.load()
        except (ImportError, AttributeError) as exc:
            logger.warning(
                "Unable to load syntax highlighter entry point '%s': %s",
                entry_point.value,
                exc,
            )
            continue
        # Entry points may expose either an instance or a class to instantiate.
        highlighter = loaded() if isinstance(loaded, type) else loaded
        register_highlighter(key, highlighter, replace=True)
        logger.debug("loaded syntax highlighter %s from %s", key, entry_point.value)


def get_highlighter(name: str) -> SyntaxHighlighter:
    """Look up a highlighter by name, scanning entry points on a miss."""
    key = normalise_name(name)
    with _REGISTRY_GUARD:
        highlighter = _HIGHLIGHTERS.get(key)
    if highlighter is not None:
        return highlighter

    _load_entry_points()
    with _REGISTRY_GUARD:
        try:
            return _HIGHLIGHTERS[key]
        except KeyError as exc:
            raise UnknownHighlighterError(name) from exc


def available_highlighters() -> list[str]:
    """Return the registered highlighter names sorted alphabetically."""
    _load_entry_points()
    with _REGISTRY_GUARD:
        return sorted(_HIGHLIGHTERS)


def reset_registry() -> None:
    """Restore the registry to the bundled highlighters only."""
    global _entry_points_loaded

    with _REGISTRY_GUARD:
        _HIGHLIGHTERS.clear()
        _HIGHLIGHTERS[TreeSitterHighlighter.name] = TreeSitterHighlighter()
        _HIGHLIGHTERS[PygmentsHighlighter.name] = PygmentsHighlighter()
        _entry_points_loaded = False


reset_registry()


__all__ = [
    "ENTRY_POINT_GROUP",
    "available_highlighters",
    "get_highlighter",
    "normalise_name",
    "register_highlighter",
    "reset_registry",
    "unregister_highlighter",
]
