from pygments.style import Style
from pygments.token import Comment, Keyword, Name, String, Token
import pytest

from syntaxpress.adapters.pygments.themes import (
    InspiredGitHubStyle,
    Theme,
    ThemeCatalog,
    resolve_theme,
)
from syntaxpress.core.config import DEFAULT_THEME
from syntaxpress.core.exceptions import ConfigurationError, ThemeConfigurationError
from syntaxpress.core.regions import BLACK, Rgb


class _BareStyle(Style):
    styles = {Keyword: "bold #ff0000"}


def test_default_catalog_contains_builtin_and_pygments_themes() -> None:
    catalog = ThemeCatalog.defaults()

    assert DEFAULT_THEME in catalog
    assert "monokai" in catalog
    assert "default" in catalog
    assert len(catalog) == len(catalog.names())


def test_catalog_names_are_sorted_and_stable() -> None:
    catalog = ThemeCatalog.defaults()
    names = catalog.names()

    assert names == sorted(names, key=str.lower)
    assert names == catalog.names()
    assert list(catalog) == names


def test_theme_snapshot_from_pygments_style() -> None:
    theme = Theme.from_pygments("bare", _BareStyle)

    keyword = theme.style_for(Keyword)
    assert keyword.foreground == Rgb(255, 0, 0)
    assert keyword.bold
    assert not keyword.italic
    assert theme.default.foreground == BLACK


def test_theme_inherits_from_parent_tokens() -> None:
    theme = Theme.from_pygments("bare", _BareStyle)

    assert theme.style_for(Keyword.Declaration) == theme.style_for(Keyword)
    assert theme.style_for(Keyword.Declaration.Custom.Nested) == theme.style_for(Keyword)


def test_unknown_token_falls_back_to_default() -> None:
    theme = Theme("empty", default=Theme.from_pygments("bare", _BareStyle).default)

    assert theme.style_for(Name.Function) == theme.default


def test_inspired_github_theme_styles() -> None:
    theme = Theme.from_pygments(DEFAULT_THEME, InspiredGitHubStyle)

    assert theme.default.foreground == Rgb.from_hex("#323232")
    assert theme.style_for(Comment.Single).italic
    assert theme.style_for(Keyword).bold
    assert theme.style_for(String.Double).foreground == Rgb.from_hex("#183691")
    assert theme.style_for(Token.Text).foreground == theme.default.foreground


def test_resolve_known_theme_is_silent(emitter) -> None:
    theme = resolve_theme("monokai", ThemeCatalog.defaults(), emitter)

    assert theme.name == "monokai"
    assert emitter.warnings == []
    assert emitter.infos == []


def test_resolve_unknown_theme_falls_back_to_default(emitter) -> None:
    catalog = ThemeCatalog.defaults()

    fallback = resolve_theme("nonexistent-theme", catalog, emitter)
    expected = resolve_theme(DEFAULT_THEME, catalog, emitter)

    assert fallback == expected
    assert fallback.name == DEFAULT_THEME
    assert len(emitter.warnings) == 1
    assert "nonexistent-theme" in emitter.warnings[0]
    assert len(emitter.infos) == 1
    assert ", ".join(catalog.names()) in emitter.infos[0]


def test_resolve_requires_default_theme(emitter) -> None:
    catalog = ThemeCatalog({"bare": _BareStyle})

    with pytest.raises(ThemeConfigurationError) as excinfo:
        resolve_theme("bare", catalog, emitter)

    assert isinstance(excinfo.value, ConfigurationError)
    assert DEFAULT_THEME in str(excinfo.value)
    assert emitter.warnings == []


def test_custom_catalog_with_default_theme(emitter) -> None:
    catalog = ThemeCatalog({DEFAULT_THEME: InspiredGitHubStyle, "bare": _BareStyle})

    theme = resolve_theme("missing", catalog, emitter)

    assert theme.name == DEFAULT_THEME
    assert emitter.infos == [f"Valid theme names are: bare, {DEFAULT_THEME}"]


def test_themes_are_immutable() -> None:
    theme = Theme.from_pygments("bare", _BareStyle)

    with pytest.raises(TypeError):
        theme.styles[Keyword] = theme.default  # type: ignore[index]
