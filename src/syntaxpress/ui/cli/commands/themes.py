"""Implementation of the `syntaxpress themes` command."""

from __future__ import annotations

from rich.table import Table

from syntaxpress.adapters.pygments.themes import ThemeCatalog
from syntaxpress.core.config import DEFAULT_THEME

from ..state import get_cli_state


def themes() -> None:
    """List the colour themes available for highlighting."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Theme")
    table.add_column("Default", justify="center")
    for name in ThemeCatalog.defaults().names():
        table.add_row(name, "*" if name == DEFAULT_THEME else "")
    get_cli_state().console.print(table)


__all__ = ["themes"]
