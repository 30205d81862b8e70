"""Implementation of the `syntaxpress render` command."""

from __future__ import annotations

from pathlib import Path
import sys

import typer

from syntaxpress.core.config import HighlightConfig, load_config
from syntaxpress.core.exceptions import CodeRenderingError, exception_messages
from syntaxpress.core.regions import RenderTarget
from syntaxpress.renderer import create_renderer

from .._options import (
    ConfigOption,
    DebugOption,
    InputPathArgument,
    LanguageOption,
    NoHighlightOption,
    OutputPathOption,
    TargetOption,
    ThemeOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..state import debug_enabled, set_cli_state


STDIN_MARKER = "-"


def _is_stdin(path: Path) -> bool:
    return str(path) == STDIN_MARKER


def _read_code(path: Path) -> str:
    if _is_stdin(path):
        return sys.stdin.read()
    try:
        # read_text would translate CRLF line endings.
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CodeRenderingError(f"Unable to read '{path}'.") from exc


def _describe(exc: CodeRenderingError) -> str:
    messages = exception_messages(exc) or [type(exc).__name__]
    if len(messages) > 1:
        return f"{messages[0]} ({messages[-1]})"
    return messages[0]


def _language_from_path(path: Path) -> str:
    if _is_stdin(path):
        return ""
    return path.suffix.lstrip(".")


def render(
    input_path: InputPathArgument,
    language: LanguageOption = None,
    target: TargetOption = RenderTarget.HTML,
    theme: ThemeOption = None,
    no_highlight: NoHighlightOption = False,
    config_path: ConfigOption = None,
    output: OutputPathOption = None,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Render a code block as HTML or LaTeX markup."""
    set_cli_state(verbosity=verbose, debug=debug)
    emitter = CliEmitter()

    try:
        config = load_config(config_path) if config_path else HighlightConfig()
        renderer = create_renderer(
            config,
            theme=theme,
            highlight=False if no_highlight else None,
            emitter=emitter,
        )
        code = _read_code(input_path)
        hint = language if language is not None else _language_from_path(input_path)
        rendered = renderer.render(code, hint, target)
    except CodeRenderingError as exc:
        if debug_enabled():
            raise
        emitter.error(_describe(exc), exc=exc)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(rendered, nl=not rendered.endswith("\n"))
        return

    try:
        output.write_text(rendered, encoding="utf-8", newline="")
    except OSError as exc:
        emitter.error(f"Unable to write '{output}'.", exc=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["render"]
