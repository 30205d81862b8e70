"""Split source code into styled regions using Pygments lexers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
import logging

from pygments.lexer import Lexer
from pygments.lexers import (
    ClassNotFound,
    TextLexer,
    find_lexer_class_by_name,
    find_lexer_class_for_filename,
)

from syntaxpress.core.exceptions import HighlightingError
from syntaxpress.core.regions import StyleAttributes, StyledRegion

from .themes import Theme


logger = logging.getLogger(__name__)

_BOM = "\ufeff"


@lru_cache(maxsize=256)
def _lexer_class(language: str) -> type[Lexer]:
    if not language:
        return TextLexer
    try:
        return find_lexer_class_by_name(language)
    except ClassNotFound:
        pass
    by_extension = find_lexer_class_for_filename(f"code.{language}")
    if by_extension is not None:
        return by_extension
    logger.debug("No lexer matches language %r, using plain text.", language)
    return TextLexer


class SyntaxCatalog:
    """Lookup of Pygments lexers by language name, alias or file extension."""

    def find(self, language: str) -> type[Lexer]:
        """Return the lexer class for ``language``, or the plain-text lexer."""
        return _lexer_class(language)

    def lexer_for(self, language: str) -> Lexer:
        """Return a fresh lexer that keeps leading newlines and ends on a newline."""
        return self.find(language)(stripnl=False, stripall=False, ensurenl=True)


class Highlighter:
    """Convert source code into a content-preserving list of styled regions."""

    def __init__(self, theme: Theme, syntaxes: SyntaxCatalog | None = None) -> None:
        self.theme = theme
        self.syntaxes = syntaxes or SyntaxCatalog()

    def highlight(self, code: str, language: str) -> list[StyledRegion]:
        """Return the regions of ``code`` highlighted as ``language``."""
        if not code:
            return []
        regions: list[StyledRegion] = []
        # Pygments silently drops leading byte order marks.
        while code.startswith(_BOM):
            regions.append(StyledRegion(_BOM, self.theme.default))
            code = code[len(_BOM) :]
        if not code:
            return _merge(regions)
        lexer = self.syntaxes.lexer_for(language)
        try:
            tokens = list(lexer.get_tokens(code))
        except Exception as exc:
            raise HighlightingError(
                f"Pygments failed to highlight a '{language or 'text'}' code block: {exc}"
            ) from exc
        pieces = ((self.theme.style_for(token), value) for token, value in tokens)
        regions.extend(_align(pieces, code))
        return _merge(regions)


def _align(pieces: Iterable[tuple[StyleAttributes, str]], code: str) -> Iterator[StyledRegion]:
    """Map lexer output back onto ``code``.

    Pygments turns ``\\r\\n`` and ``\\r`` into ``\\n``; regions always slice the
    original string instead. Line-based lexers need a final newline, so the
    one Pygments appends to ``code`` is consumed here and never emitted.
    """
    position = 0
    appended_newline = False
    for style, value in pieces:
        start = position
        for char in value:
            if code.startswith(char, position):
                position += 1
            elif char == "\n" and code.startswith("\r", position):
                position += 2 if code.startswith("\r\n", position) else 1
            elif char == "\n" and position == len(code) and not appended_newline:
                appended_newline = True
            else:
                raise HighlightingError(
                    f"Highlighted text diverges from the source at offset {position}."
                )
        if position > start:
            yield StyledRegion(code[start:position], style)
    if position != len(code):
        raise HighlightingError(
            f"Highlighting stopped at offset {position} of {len(code)} characters."
        )


def _merge(regions: Iterable[StyledRegion]) -> list[StyledRegion]:
    merged: list[StyledRegion] = []
    for region in regions:
        if merged and merged[-1].style == region.style:
            merged[-1] = StyledRegion(merged[-1].text + region.text, region.style)
        else:
            merged.append(region)
    return merged


__all__ = ["Highlighter", "SyntaxCatalog"]
