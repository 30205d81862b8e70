"""Diagnostic emitter bridging the renderers with CLI rendering utilities."""

from __future__ import annotations

from .state import emit_error, emit_info, emit_warning


class CliEmitter:
    """Emit renderer diagnostics through the rich stderr console."""

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def info(self, message: str) -> None:
        emit_info(message)


__all__ = ["CliEmitter"]
