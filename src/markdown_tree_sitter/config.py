"""Configuration model for ``syntax_highlighter_opts``.

`default_lang` (`str | None`)
: Language used when a fenced block or code span does not declare one.

`tree_sitter_parsers_dir` (`Path | None`)
: Directory holding tree-sitter parsers. The host validates it before any
  fragment with a language is highlighted; ``~`` is expanded.

`block` (`dict[str, Any]`)
: Options applied to fenced code blocks only, merged over the top level.

`span` (`dict[str, Any]`)
: Options applied to inline code spans only, merged over the top level.

Any other key is kept and forwarded to the highlighter untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import HighlighterConfigError
from .highlighter import SpanKind


_KIND_SECTIONS = {SpanKind.BLOCK: "block", SpanKind.INLINE: "span"}


class HighlighterOptions(BaseModel):
    """Options forwarded to the configured syntax highlighter."""

    model_config = ConfigDict(extra="allow")

    default_lang: str | None = None
    tree_sitter_parsers_dir: Path | None = None
    block: dict[str, Any] = Field(default_factory=dict)
    span: dict[str, Any] = Field(default_factory=dict)

    @field_validator("default_lang", mode="before")
    @classmethod
    def blank_language_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("tree_sitter_parsers_dir", mode="after")
    @classmethod
    def expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @classmethod
    def coerce(cls, value: HighlighterOptions | Mapping[str, Any] | None) -> HighlighterOptions:
        """Build options from ``None``, a mapping, or an existing instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise HighlighterConfigError(
                f"Highlighter options must be a mapping, got {type(value).__name__}."
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise HighlighterConfigError(f"Invalid highlighter options: {exc}") from exc

    def for_kind(self, kind: SpanKind | str) -> dict[str, Any]:
        """Return the flat options for ``kind`` with its section merged in."""
        merged = self.model_dump(exclude={"block", "span"})
        merged.update(getattr(self, _KIND_SECTIONS[SpanKind(kind)]))
        return merged


__all__ = ["HighlighterOptions"]
