"""Pydantic configuration models with code-baked defaults.

Defaults live here; a config file only lists overrides. An empty file
(or none at all) lints with the double-underscore BEM variant. Unknown
keys are rejected so a misspelt option fails loudly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bemlint.domain.variants import DEFAULT_VARIANT

DEFAULT_EXTENSIONS: tuple[str, ...] = (".css", ".scss", ".sass", ".less", ".html", ".htm")


class LintConfig(BaseModel):
    """[lint] section.

    ``custom_namespaces`` maps extra prefixes to namespace names, e.g.
    ``{"p-" = "component"}``. The variant name and the table are checked
    when a validator is built, not here.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    variant: str = DEFAULT_VARIANT
    strict: bool = False
    custom_namespaces: dict[str, str] = Field(default_factory=dict)
    min_severity: str = "warning"


class ScanConfig(BaseModel):
    """[scan] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = Field(default_factory=list)
    ignore_classes: list[str] = Field(default_factory=list)
