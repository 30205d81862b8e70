"""Shared CLI state: verbosity, traceback display and the rich consoles."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING, TextIO


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_info",
    "emit_warning",
    "get_cli_state",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Options shared by every command of a CLI invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _consoles: dict[str, Console] = field(default_factory=dict, init=False, repr=False)

    def _console_for(self, name: str, stream: TextIO, **options: object) -> Console:
        from rich.console import Console

        # Test runners swap the standard streams between invocations.
        console = self._consoles.get(name)
        if console is None or console.file is not stream:
            console = Console(file=stream, **options)
            self._consoles[name] = console
        return console

    @property
    def console(self) -> Console:
        """Console bound to stdout, used for command results."""
        return self._console_for("out", sys.stdout)

    @property
    def err_console(self) -> Console:
        """Console bound to stderr, used for every diagnostic."""
        return self._console_for("err", sys.stderr, highlight=False)


_STATE: ContextVar[CLIState | None] = ContextVar("syntaxpress_cli_state", default=None)

_LEVEL_STYLES = {"error": "red", "warning": "yellow", "info": "green"}


def get_cli_state() -> CLIState:
    """Return the state of the running invocation, creating it on first use."""
    state = _STATE.get()
    if state is None:
        state = CLIState()
        _STATE.set(state)
    return state


def set_cli_state(*, verbosity: int | None = None, debug: bool | None = None) -> CLIState:
    """Apply command-line options to the shared state and return it."""
    state = get_cli_state()
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _causes(exc: BaseException) -> list[str]:
    causes: list[str] = []
    seen: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        causes.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or current.__context__
    return causes


def _render(level: str, message: str, exception: BaseException | None = None) -> None:
    from rich.text import Text

    state = get_cli_state()
    style = _LEVEL_STYLES[level]
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))

    details: list[str] = []
    if exception is not None and state.verbosity >= 1:
        detail = str(exception).strip()
        if detail and detail not in message:
            details.append(detail)
        details.append(f"type: {type(exception).__name__}")
        if state.verbosity >= 2:
            details.extend(f"caused by {cause}" for cause in _causes(exception))
    for line in details:
        text.append(f"\n  {line}", style=style)

    state.err_console.print(text)


def emit_info(message: str) -> None:
    """Print an informational note on stderr."""
    _render("info", message)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    """Print a warning on stderr, with exception detail when verbose."""
    _render("warning", message, exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    """Print an error on stderr, with exception detail when verbose."""
    _render("error", message, exception)


def debug_enabled() -> bool:
    """Return whether failures should propagate with a full traceback."""
    return get_cli_state().show_tracebacks
