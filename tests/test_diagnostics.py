from __future__ import annotations

import logging

import pytest

from syntaxpress.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from syntaxpress.core.exceptions import (
    CodeRenderingError,
    HighlightingError,
    exception_messages,
)
from syntaxpress.ui.cli.diagnostics import CliEmitter
from syntaxpress.ui.cli.state import set_cli_state


def _raise_nested_error() -> None:
    try:
        raise ValueError("lexer state corrupted")
    except ValueError as exc:
        raise HighlightingError("highlighting failed") from exc


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
        emitter.info("ignored")
    assert not caplog.records


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter()
    with caplog.at_level(logging.INFO):
        emitter.warning("careful")
        emitter.error("boom")
        emitter.info("fyi")

    levels = {record.message: record.levelno for record in caplog.records}
    assert levels == {"careful": logging.WARNING, "boom": logging.ERROR, "fyi": logging.INFO}


def test_logging_emitter_attaches_exception(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(logger_obj=logging.getLogger("syntaxpress.tests"))
    error = HighlightingError("bad")
    with caplog.at_level(logging.WARNING, logger="syntaxpress.tests"):
        emitter.warning("careful", exc=error)

    assert caplog.records[0].exc_info is not None


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)
    assert isinstance(CliEmitter(), DiagnosticEmitter)


def test_cli_emitter_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter()

    emitter.warning("Heads up")
    emitter.error("Boom", exc=HighlightingError("lexer exploded"))
    emitter.info("Valid theme names are: a, b")

    captured = capsys.readouterr()
    assert "Heads up" in captured.err
    assert "Boom" in captured.err
    assert "lexer exploded" in captured.err
    assert "Valid theme names are" in captured.err
    assert captured.out == ""


def test_exception_messages_follow_the_cause_chain() -> None:
    with pytest.raises(CodeRenderingError) as excinfo:
        _raise_nested_error()

    assert exception_messages(excinfo.value) == ["highlighting failed", "lexer state corrupted"]


def test_cli_emitter_lists_causes_when_very_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=2, debug=False)

    with pytest.raises(CodeRenderingError) as excinfo:
        _raise_nested_error()
    CliEmitter().error("Rendering failed", exc=excinfo.value)

    err = capsys.readouterr().err
    assert "type: HighlightingError" in err
    assert "caused by ValueError: lexer state corrupted" in err


def test_cli_emitter_hides_detail_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    set_cli_state(verbosity=0, debug=False)

    CliEmitter().error("Rendering failed", exc=HighlightingError("lexer exploded"))

    err = capsys.readouterr().err
    assert "error: Rendering failed" in err
    assert "lexer exploded" not in err
