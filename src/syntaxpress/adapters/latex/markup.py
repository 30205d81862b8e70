"""Serialise styled regions into LaTeX fragments."""

from __future__ import annotations

from collections.abc import Iterable
import re

from syntaxpress.core.regions import BLACK, Rgb, StyleAttributes, StyledRegion

from .utils import ALLOW_BREAK, escape_latex_chars, insert_breaks


VERBATIM_ENVIRONMENT = "spverbatim"

LINE_BREAK = "\\\\{}\n"
BREAKABLE_SPACE = r"\hphantom{ }" + ALLOW_BREAK

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")
_VERBATIM_END = rf"\end{{{VERBATIM_ENVIRONMENT}}}"
_VERBATIM_BEGIN = rf"\begin{{{VERBATIM_ENVIRONMENT}}}"


def _rgb_components(color: Rgb) -> str:
    return ", ".join(f"{channel / 255:.3f}" for channel in color)


def style_commands(style: StyleAttributes) -> list[str]:
    """Return the wrapping commands for ``style``, innermost first.

    The order is fixed: monospace, colour, bold, italic, underline.
    """
    commands = [r"\texttt"]
    if style.foreground != BLACK:
        commands.append(rf"\textcolor[rgb]{{{_rgb_components(style.foreground)}}}")
    if style.bold:
        commands.append(r"\textbf")
    if style.italic:
        commands.append(r"\emph")
    if style.underline:
        commands.append(r"\underline")
    return commands


def render_latex_region(region: StyledRegion, *, legacy_accents: bool = False) -> str:
    """Render a single region as nested LaTeX commands."""
    content = escape_latex_chars(region.text, legacy_accents=legacy_accents)
    content = insert_breaks(content)
    content = _NEWLINE_PATTERN.sub(lambda _match: LINE_BREAK, content)
    content = content.replace(" ", BREAKABLE_SPACE)
    for command in style_commands(region.style):
        content = f"{command}{{{content}}}"
    return content


def render_latex_regions(regions: Iterable[StyledRegion], *, legacy_accents: bool = False) -> str:
    """Render highlighted regions inside a ``\\sloppy`` group."""
    body = "".join(
        render_latex_region(region, legacy_accents=legacy_accents) for region in regions
    )
    return f"{{\\sloppy {body}}}"


def render_latex_plain(code: str) -> str:
    """Wrap unhighlighted code in a verbatim environment.

    Verbatim content is copied literally; only the sequence that would close
    the environment early is moved outside of it.
    """
    if _VERBATIM_END in code:
        escaped_end = r"\texttt{" + escape_latex_chars(_VERBATIM_END) + "}"
        code = code.replace(_VERBATIM_END, f"{_VERBATIM_END}{escaped_end}{_VERBATIM_BEGIN}")
    return f"{_VERBATIM_BEGIN}{code}{_VERBATIM_END}\n"


def latex_packages(highlighting: bool) -> tuple[str, ...]:
    """Return the LaTeX packages required by the fragments produced."""
    if highlighting:
        return ("xcolor",)
    return (VERBATIM_ENVIRONMENT,)


__all__ = [
    "BREAKABLE_SPACE",
    "LINE_BREAK",
    "VERBATIM_ENVIRONMENT",
    "latex_packages",
    "render_latex_plain",
    "render_latex_region",
    "render_latex_regions",
    "style_commands",
]
