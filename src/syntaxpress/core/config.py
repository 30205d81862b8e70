"""Configuration model used by the code block renderers.

HighlightConfig

`engine` (`"pygments" | "none"`)
: Highlighting engine. `pygments` colours code blocks according to `theme`;
  `none` disables highlighting and renders escaped, unstyled blocks.

`theme` (`str`)
: Name of the colour theme. Any installed Pygments style is accepted, as well
  as the built-in `InspiredGitHub` theme used by default. Unknown names fall
  back to the default with a warning.

`legacy_latex_accents` (`bool`)
: When `True`, escape accented characters in LaTeX output using legacy LaTeX
  macros. When `False`, keep Unicode glyphs compatible with LuaLaTeX/XeLaTeX
  (default).

The same fields can be read from a YAML document, either at the top level or
nested under a `highlight` key:

```yaml
highlight:
  engine: pygments
  theme: monokai
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigurationError


DEFAULT_THEME = "InspiredGitHub"


class HighlightConfig(BaseModel):
    """Options selecting and tuning the code highlighting engine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    engine: Literal["pygments", "none"] = Field(
        default="pygments", description="Highlighting engine"
    )
    theme: str = Field(default=DEFAULT_THEME, description="Colour theme name")
    legacy_latex_accents: bool = False

    @field_validator("engine", mode="before")
    @classmethod
    def _normalise_engine(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def highlighting(self) -> bool:
        """Return whether a highlighting engine is selected."""
        return self.engine != "none"


def load_config(path: Path | str) -> HighlightConfig:
    """Load a :class:`HighlightConfig` from a YAML file."""
    source = Path(path)
    try:
        payload = yaml.safe_load(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file '{source}'.") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in configuration file '{source}'.") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigurationError(
            f"Configuration file '{source}' must contain a mapping, "
            f"got {type(payload).__name__}."
        )
    if "highlight" in payload:
        payload = payload["highlight"] or {}

    try:
        return HighlightConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in '{source}': {exc}") from exc


__all__ = ["DEFAULT_THEME", "HighlightConfig", "load_config"]
