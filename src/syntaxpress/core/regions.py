"""Data model shared by the highlighter and the markup renderers.

A render call turns a code string into an ordered list of
:class:`StyledRegion` objects. Joining the ``text`` of every region yields the
original code; the markup renderers only decide how each region is escaped
and decorated for their target.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Rgb(NamedTuple):
    """Foreground colour expressed as 8-bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Rgb:
        """Parse ``#rrggbb``, ``rrggbb`` or the ``rgb`` shorthand."""
        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(char * 2 for char in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hexadecimal colour: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Rgb(0, 0, 0)


@dataclass(frozen=True, slots=True)
class StyleAttributes:
    """Visual attributes attached to a region of code."""

    foreground: Rgb = BLACK
    bold: bool = False
    italic: bool = False
    underline: bool = False


PLAIN_STYLE = StyleAttributes()


@dataclass(frozen=True, slots=True)
class StyledRegion:
    """Contiguous slice of code rendered with a single style."""

    text: str
    style: StyleAttributes = PLAIN_STYLE


class RenderTarget(str, Enum):
    """Markup formats a code block can be rendered to."""

    HTML = "html"
    LATEX = "latex"


def normalize_language(hint: str) -> str:
    """Strip a language hint of its modifiers, e.g. ``"rust,ignore"`` -> ``"rust"``."""
    return hint.split(",", 1)[0].strip()


def join_regions(regions: Iterable[StyledRegion]) -> str:
    """Return the code covered by ``regions``."""
    return "".join(region.text for region in regions)


__all__ = [
    "BLACK",
    "PLAIN_STYLE",
    "RenderTarget",
    "Rgb",
    "StyleAttributes",
    "StyledRegion",
    "join_regions",
    "normalize_language",
]
