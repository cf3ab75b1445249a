"""Options controlling how documents are parsed and how quirks behave."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

ParserName = Literal["html.parser", "lxml", "html5lib"]

# Tree builders that wrap every fragment in <html><body>.
SCAFFOLDING_PARSERS = frozenset({"lxml", "html5lib"})


class DomOptions(BaseModel):
    """Parser choice and compatibility switches shared by documents and elements."""

    parser: ParserName = Field(
        "html.parser", description="Tree builder passed to BeautifulSoup."
    )
    legacy_text_properties: bool = Field(
        True,
        alias="legacyTextProperties",
        description=(
            "Read 'outertext' as inner markup and 'innertext' as outer markup, "
            "as older callers expect."
        ),
    )
    null_parent: bool = Field(
        True,
        alias="nullParent",
        description="parent() wraps a missing parent instead of returning None.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def scaffolds_fragments(self) -> bool:
        return self.parser in SCAFFOLDING_PARSERS


DEFAULT_OPTIONS = DomOptions()


def load_options(path: Path) -> DomOptions:
    """Load options from a YAML mapping. An empty file yields the defaults."""

    path = Path(path)
    try:
        payload: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"{path} must contain a mapping of options.")
    try:
        return DomOptions.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid options in {path}: {exc}") from exc


__all__ = ["DEFAULT_OPTIONS", "DomOptions", "ParserName", "load_options"]
