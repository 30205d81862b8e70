"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from syntaxpress.core.regions import RenderTarget


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    Path,
    typer.Argument(
        metavar="INPUT",
        help="Source file containing the code block, or '-' to read from stdin.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

LanguageOption = Annotated[
    str | None,
    typer.Option(
        "--language",
        "-l",
        help=(
            "Language hint such as 'rust' or 'rust,ignore'. "
            "Defaults to the input file extension."
        ),
        rich_help_panel=INPUTS_PANEL,
    ),
]

TargetOption = Annotated[
    RenderTarget,
    typer.Option(
        "--target",
        "-t",
        case_sensitive=False,
        help="Markup format to produce.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

ThemeOption = Annotated[
    str | None,
    typer.Option(
        "--theme",
        help="Colour theme used for highlighting (see 'syntaxpress themes').",
        rich_help_panel=RENDERING_PANEL,
    ),
]

NoHighlightOption = Annotated[
    bool,
    typer.Option(
        "--no-highlight",
        help="Disable syntax highlighting and emit escaped, unstyled markup.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file providing the highlight configuration.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the rendered markup to this file instead of stdout.",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "ConfigOption",
    "DebugOption",
    "InputPathArgument",
    "LanguageOption",
    "NoHighlightOption",
    "OutputPathOption",
    "TargetOption",
    "ThemeOption",
    "VerbosityOption",
]
