"""Colour themes backed by Pygments styles."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Any

from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    String,
    Token,
    _TokenType,
)

from syntaxpress.core.config import DEFAULT_THEME
from syntaxpress.core.diagnostics import DiagnosticEmitter
from syntaxpress.core.exceptions import ThemeConfigurationError
from syntaxpress.core.regions import BLACK, Rgb, StyleAttributes


logger = logging.getLogger(__name__)


class InspiredGitHubStyle(Style):
    """Light theme mimicking GitHub's classic code colours."""

    name = DEFAULT_THEME
    background_color = "#ffffff"

    styles = {
        Token: "#323232",
        Comment: "italic #969896",
        Keyword: "bold #a71d5d",
        Keyword.Constant: "#0086b3",
        Keyword.Type: "#a71d5d",
        Operator: "bold #a71d5d",
        Operator.Word: "bold #a71d5d",
        Name.Builtin: "#0086b3",
        Name.Class: "bold #0086b3",
        Name.Function: "bold #795da3",
        Name.Decorator: "#795da3",
        Name.Attribute: "#795da3",
        Name.Tag: "#63a35c",
        Name.Constant: "#0086b3",
        Name.Namespace: "#0086b3",
        Name.Exception: "bold #0086b3",
        String: "#183691",
        String.Escape: "#0086b3",
        String.Regex: "#183691",
        Number: "#0086b3",
        Generic.Deleted: "#bd2c00",
        Generic.Inserted: "#55a532",
        Generic.Heading: "bold #1d3e81",
        Generic.Subheading: "bold #1d3e81",
        Generic.Emph: "italic",
        Generic.Strong: "bold",
        Error: "#b52a1d",
    }


def _attributes(definition: Mapping[str, Any], fallback: Rgb) -> StyleAttributes:
    color = definition.get("color")
    return StyleAttributes(
        foreground=Rgb.from_hex(color) if color else fallback,
        bold=bool(definition.get("bold")),
        italic=bool(definition.get("italic")),
        underline=bool(definition.get("underline")),
    )


@dataclass(frozen=True, slots=True)
class Theme:
    """Named, read-only mapping from token types to visual attributes."""

    name: str
    default: StyleAttributes
    styles: Mapping[_TokenType, StyleAttributes] = field(
        default_factory=lambda: MappingProxyType({}), repr=False, hash=False
    )

    @classmethod
    def from_pygments(cls, name: str, style: type[Style]) -> Theme:
        """Snapshot a Pygments style class into an immutable theme."""
        default = _attributes(style.style_for_token(Token), BLACK)
        styles = {
            token: _attributes(definition, default.foreground) for token, definition in style
        }
        return cls(name=name, default=default, styles=MappingProxyType(styles))

    def style_for(self, token: _TokenType) -> StyleAttributes:
        """Return the attributes of ``token``, inheriting from its parents."""
        current: _TokenType | None = token
        while current is not None:
            attributes = self.styles.get(current)
            if attributes is not None:
                return attributes
            current = current.parent
        return self.default


class ThemeCatalog:
    """Themes available to the renderer, loaded on demand.

    Values are either Pygments style classes or the registered name of a
    Pygments style, resolved when the theme is first loaded.
    """

    def __init__(self, styles: Mapping[str, type[Style] | str]) -> None:
        self._styles: dict[str, type[Style] | str] = dict(styles)

    @classmethod
    def defaults(cls) -> ThemeCatalog:
        """Return every installed Pygments style plus the built-in default theme."""
        styles: dict[str, type[Style] | str] = {name: name for name in get_all_styles()}
        styles[DEFAULT_THEME] = InspiredGitHubStyle
        return cls(styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._styles)

    def names(self) -> list[str]:
        """Return theme names in a stable order."""
        return sorted(self._styles, key=str.lower)

    def load(self, name: str) -> Theme:
        """Instantiate the theme registered under ``name``."""
        source = self._styles[name]
        style = get_style_by_name(source) if isinstance(source, str) else source
        logger.debug("Loaded theme %s from %s", name, style.__name__)
        return Theme.from_pygments(name, style)


def resolve_theme(requested: str, catalog: ThemeCatalog, emitter: DiagnosticEmitter) -> Theme:
    """Return the theme named ``requested``, falling back to the default theme."""
    if DEFAULT_THEME not in catalog:
        raise ThemeConfigurationError(
            f"Theme catalog does not provide the default theme '{DEFAULT_THEME}'."
        )
    if requested in catalog:
        return catalog.load(requested)

    emitter.warning(f"Could not set theme to '{requested}', defaulting to '{DEFAULT_THEME}'.")
    emitter.info(f"Valid theme names are: {', '.join(catalog.names())}")
    return catalog.load(DEFAULT_THEME)


__all__ = [
    "InspiredGitHubStyle",
    "Theme",
    "ThemeCatalog",
    "resolve_theme",
]
