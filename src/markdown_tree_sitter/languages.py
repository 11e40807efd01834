"""Language configuration lookup performed by the host before highlighting."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from .exceptions import LanguageNotFoundError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageConfiguration:
    """Resolved configuration for a language scope."""

    scope: str
    parsers_dir: Path | None = None


def resolve_language_configuration(
    scope: str,
    parsers_dir: Path | str | None,
) -> LanguageConfiguration:
    """Validate the parsers directory configured for ``scope``.

    No grammar is loaded: a scope resolves whenever the configured parsers
    directory exists, or when no directory is configured at all.
    """
    if parsers_dir is None:
        return LanguageConfiguration(scope=scope)

    directory = Path(parsers_dir).expanduser()
    try:
        found = directory.is_dir()
    except OSError:
        found = False
    if not found:
        logger.debug("parsers directory %s missing for scope %s", directory, scope)
        raise LanguageNotFoundError(scope)

    logger.debug("resolved scope %s against %s", scope, directory)
    return LanguageConfiguration(scope=scope, parsers_dir=directory)


__all__ = ["LanguageConfiguration", "resolve_language_configuration"]
