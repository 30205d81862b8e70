"""Custom exception hierarchy for the code block renderers."""

from __future__ import annotations


class CodeRenderingError(RuntimeError):
    """Base exception for code block rendering failures."""


class HighlightingError(CodeRenderingError):
    """Raised when the highlighting engine fails while rendering a code block."""


class ConfigurationError(CodeRenderingError):
    """Raised when the renderer configuration cannot be honoured."""


class ThemeConfigurationError(ConfigurationError):
    """Raised when the theme catalog does not provide the default theme."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "CodeRenderingError",
    "ConfigurationError",
    "HighlightingError",
    "ThemeConfigurationError",
    "exception_messages",
]
