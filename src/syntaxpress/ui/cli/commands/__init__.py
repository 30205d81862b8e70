"""CLI command implementations exposed via `syntaxpress.ui.cli`."""

from __future__ import annotations

from .render import render
from .themes import themes


__all__ = ["render", "themes"]
