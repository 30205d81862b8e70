"""Code block renderers producing HTML and LaTeX markup.

Two implementations share the :class:`CodeRenderer` interface:

* :class:`PygmentsRenderer` highlights code with Pygments and emits coloured
  markup for each styled region.
* :class:`PlainRenderer` is used when highlighting is disabled and emits
  escaped, unstyled blocks.

:func:`create_renderer` picks one of them from a :class:`HighlightConfig`,
resolving the theme once. Renderers hold no mutable state and can be shared
between threads once created.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging

from syntaxpress.adapters.html.markup import render_html_plain, render_html_regions
from syntaxpress.adapters.latex.markup import (
    latex_packages,
    render_latex_plain,
    render_latex_regions,
)
from syntaxpress.adapters.pygments.highlighter import Highlighter, SyntaxCatalog
from syntaxpress.adapters.pygments.themes import Theme, ThemeCatalog, resolve_theme
from syntaxpress.core.config import HighlightConfig
from syntaxpress.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from syntaxpress.core.regions import RenderTarget, StyledRegion, normalize_language


logger = logging.getLogger(__name__)


class CodeRenderer(ABC):
    """Render code blocks for every supported markup target."""

    highlighting: bool = False

    @property
    def theme_name(self) -> str | None:
        """Name of the colour theme in use, if any."""
        return None

    @property
    def latex_packages(self) -> tuple[str, ...]:
        """LaTeX packages the rendered fragments depend on."""
        return latex_packages(self.highlighting)

    @abstractmethod
    def render_html(self, code: str, language: str) -> str:
        """Render ``code`` as a single HTML block."""

    @abstractmethod
    def render_latex(self, code: str, language: str) -> str:
        """Render ``code`` as a LaTeX fragment."""

    def render(self, code: str, language: str, target: RenderTarget | str) -> str:
        """Render ``code`` for ``target``."""
        target = RenderTarget(target)
        if target is RenderTarget.HTML:
            return self.render_html(code, language)
        return self.render_latex(code, language)


class PygmentsRenderer(CodeRenderer):
    """Renderer colouring code blocks with Pygments."""

    highlighting = True

    def __init__(
        self,
        theme: Theme,
        *,
        syntaxes: SyntaxCatalog | None = None,
        legacy_accents: bool = False,
    ) -> None:
        self.highlighter = Highlighter(theme, syntaxes)
        self.legacy_accents = legacy_accents

    @property
    def theme_name(self) -> str:
        return self.highlighter.theme.name

    def regions(self, code: str, language: str) -> list[StyledRegion]:
        """Return the styled regions of ``code`` for a raw language hint."""
        return self.highlighter.highlight(code, normalize_language(language))

    def render_html(self, code: str, language: str) -> str:
        return render_html_regions(self.regions(code, language))

    def render_latex(self, code: str, language: str) -> str:
        return render_latex_regions(
            self.regions(code, language), legacy_accents=self.legacy_accents
        )


class PlainRenderer(CodeRenderer):
    """Renderer used when syntax highlighting is disabled."""

    def render_html(self, code: str, language: str) -> str:
        return render_html_plain(code, language)

    def render_latex(self, code: str, language: str) -> str:
        return render_latex_plain(code)


def create_renderer(
    config: HighlightConfig | None = None,
    *,
    theme: str | None = None,
    highlight: bool | None = None,
    emitter: DiagnosticEmitter | None = None,
    catalog: ThemeCatalog | None = None,
) -> CodeRenderer:
    """Build the renderer selected by ``config``.

    ``theme`` and ``highlight`` override the matching configuration values.
    An unknown theme is reported through ``emitter`` and replaced by the
    default theme; a catalog without the default theme raises
    :class:`~syntaxpress.core.exceptions.ThemeConfigurationError`.
    """
    config = config or HighlightConfig()
    overrides: dict[str, object] = {}
    if theme is not None:
        overrides["theme"] = theme
    if highlight is not None:
        overrides["engine"] = "pygments" if highlight else "none"
    if overrides:
        config = config.model_copy(update=overrides)
    emitter = emitter or LoggingEmitter()

    if not config.highlighting:
        emitter.info("Syntax highlighting is disabled, code blocks will not be coloured.")
        return PlainRenderer()

    resolved = resolve_theme(config.theme, catalog or ThemeCatalog.defaults(), emitter)
    logger.debug("Highlighting code blocks with theme %s", resolved.name)
    return PygmentsRenderer(resolved, legacy_accents=config.legacy_latex_accents)


__all__ = [
    "CodeRenderer",
    "PlainRenderer",
    "PygmentsRenderer",
    "create_renderer",
]
