"""Render highlighted code blocks as HTML and LaTeX markup."""

from __future__ import annotations

from syntaxpress.adapters.pygments.highlighter import Highlighter, SyntaxCatalog
from syntaxpress.adapters.pygments.themes import Theme, ThemeCatalog, resolve_theme
from syntaxpress.core.config import DEFAULT_THEME, HighlightConfig, load_config
from syntaxpress.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from syntaxpress.core.exceptions import (
    CodeRenderingError,
    ConfigurationError,
    HighlightingError,
    ThemeConfigurationError,
)
from syntaxpress.core.regions import (
    RenderTarget,
    Rgb,
    StyleAttributes,
    StyledRegion,
    normalize_language,
)
from syntaxpress.renderer import CodeRenderer, PlainRenderer, PygmentsRenderer, create_renderer
from syntaxpress.version import get_version


__version__ = get_version()

__all__ = [
    "DEFAULT_THEME",
    "CodeRenderer",
    "CodeRenderingError",
    "ConfigurationError",
    "DiagnosticEmitter",
    "HighlightConfig",
    "Highlighter",
    "HighlightingError",
    "LoggingEmitter",
    "NullEmitter",
    "PlainRenderer",
    "PygmentsRenderer",
    "RenderTarget",
    "Rgb",
    "StyleAttributes",
    "StyledRegion",
    "SyntaxCatalog",
    "Theme",
    "ThemeCatalog",
    "ThemeConfigurationError",
    "__version__",
    "create_renderer",
    "get_version",
    "load_config",
    "normalize_language",
    "resolve_theme",
]
