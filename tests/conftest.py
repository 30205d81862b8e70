"""Shared pytest fixtures for syntaxpress tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from syntaxpress.core.regions import Rgb, StyleAttributes, StyledRegion


@dataclass
class RecordingEmitter:
    """Emitter capturing every diagnostic for later assertions."""

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def red_bold_region() -> StyledRegion:
    return StyledRegion("fn", StyleAttributes(foreground=Rgb(255, 0, 0), bold=True))
