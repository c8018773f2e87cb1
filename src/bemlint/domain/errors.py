"""Exceptions and violation messages for class-name validation.

Only malformed input types raise. Everything a well-typed token can get
wrong is reported as a :class:`~bemlint.domain.types.Violation` instead.
"""

from __future__ import annotations

MULTIPLE_MODIFIERS = "multiple modifier delimiters"
MULTIPLE_ELEMENTS = "multiple element delimiters"
INVALID_IDENTIFIER = "invalid identifier segment"
FORBIDS_DESCENDANTS = "namespace forbids descendants/modifiers"
JS_HOOK_MODIFIER = "js hooks must not declare modifiers"
JS_HOOK_ELEMENT = "js hooks should name a single behaviour, not an element"
MISSING_PREFIX = "class has no namespace prefix"


class BemlintError(Exception):
    """Base class for all bemlint errors."""


class ClassNameSyntaxError(BemlintError):
    """Input is not a well-formed class-name token."""

    def __init__(self, message: str, raw: object) -> None:
        super().__init__(f"{message}: {raw!r}")
        self.reason = message
        self.raw = raw


class ConfigError(BemlintError):
    """Unknown variant or malformed custom namespace table."""
