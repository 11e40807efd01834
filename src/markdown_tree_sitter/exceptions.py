"""Custom exception hierarchy for highlighter lookup and configuration."""

from __future__ import annotations


class HighlighterError(RuntimeError):
    """Base exception for syntax highlighter integration failures."""


class LanguageNotFoundError(HighlighterError):
    """Raised when no language configuration can be resolved for a scope."""

    def __init__(self, scope: str, reason: str = "Language not found") -> None:
        self.scope = scope
        self.reason = reason
        super().__init__(
            f"Error retrieving language configuration for scope '{scope}': {reason}"
        )


class UnknownHighlighterError(HighlighterError, KeyError):
    """Raised when a highlighter name is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No syntax highlighter named '{name}'.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class HighlighterRegistrationError(HighlighterError):
    """Raised when a highlighter cannot be added to the registry."""


class HighlighterConfigError(HighlighterError, ValueError):
    """Raised when highlighter options fail validation."""


__all__ = [
    "HighlighterConfigError",
    "HighlighterError",
    "HighlighterRegistrationError",
    "LanguageNotFoundError",
    "UnknownHighlighterError",
]
