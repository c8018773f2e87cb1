"""Namespace and violation enums shared across the domain layer.

Namespaces classify the structural role of a class by its prefix
(``l-``, ``u-``, ``t-``, ``is-``/``has-``, ``js-``, ``o-``, ``c-``).
Classes carrying none of a variant's prefixes land in ``none``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Namespace(StrEnum):
    """Structural role of a class name."""

    LAYOUT = "layout"
    UTILITY = "utility"
    TYPOGRAPHY = "typography"
    STATE = "state"
    JS_HOOK = "jsHook"
    OBJECT = "object"
    COMPONENT = "component"
    NONE = "none"


class ViolationKind(StrEnum):
    """How a violation affects the result.

    ``syntax`` and ``semantic`` always fail a class name; ``advisory``
    fails it only in strict mode.
    """

    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    ADVISORY = "advisory"


class Violation(BaseModel):
    """A single rule break reported against a class name."""

    model_config = {"frozen": True}

    kind: ViolationKind
    message: str

    @property
    def blocking(self) -> bool:
        """Whether the violation fails the class name outside strict mode."""
        return self.kind is not ViolationKind.ADVISORY
