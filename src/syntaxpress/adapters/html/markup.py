"""Serialise styled regions into HTML blocks."""

from __future__ import annotations

from collections.abc import Iterable
import html

from syntaxpress.core.regions import StyleAttributes, StyledRegion


def inline_style(style: StyleAttributes) -> str:
    """Return the CSS declarations for ``style`` (no background)."""
    declarations = [f"color:{style.foreground.to_hex()};"]
    if style.bold:
        declarations.append("font-weight:bold;")
    if style.italic:
        declarations.append("font-style:italic;")
    if style.underline:
        declarations.append("text-decoration:underline;")
    return "".join(declarations)


def render_html_regions(regions: Iterable[StyledRegion]) -> str:
    """Render highlighted regions as coloured spans inside a ``<pre>`` block."""
    spans = "".join(
        f'<span style="{inline_style(region.style)}">{html.escape(region.text)}</span>'
        for region in regions
    )
    return f"<pre>{spans}</pre>"


def render_html_plain(code: str, language: str) -> str:
    """Render unhighlighted code, tagged with its language for client-side tools."""
    return (
        f'<pre><code class="language-{html.escape(language, quote=True)}">'
        f"{html.escape(code)}</code></pre>"
    )


__all__ = ["inline_style", "render_html_plain", "render_html_regions"]
