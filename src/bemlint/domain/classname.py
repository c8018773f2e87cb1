"""Structured class names and their rendering back to strings."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pydantic import BaseModel, model_validator

from bemlint.domain.types import Namespace

if TYPE_CHECKING:
    from bemlint.domain.variants import NamingVariant

IDENTIFIER_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ClassName(BaseModel):
    """A class name split into namespace, block, element and modifier.

    INVARIANT: an element needs a block; a modifier attaches to the block
    or the element and never stands alone. Every segment is a lowercase
    dashed identifier.
    """

    model_config = {"frozen": True}

    namespace: Namespace = Namespace.NONE
    block: str
    element: str | None = None
    modifier: str | None = None
    prefix: str = ""
    raw: str = ""

    @model_validator(mode="after")
    def check_segments(self) -> ClassName:
        if not self.block:
            msg = "a class name needs a block"
            raise ValueError(msg)
        for label, segment in (
            ("block", self.block),
            ("element", self.element),
            ("modifier", self.modifier),
        ):
            if segment is not None and not IDENTIFIER_PATTERN.match(segment):
                msg = f"invalid {label} {segment!r}: expected a lowercase dashed identifier"
                raise ValueError(msg)
        return self

    def render(self, variant: NamingVariant) -> str:
        """Synthesize the class string under *variant*'s delimiters.

        Uses the prefix the name was parsed with when *variant* maps it to
        the same namespace, else the variant's primary prefix.

        Raises:
            ValueError: the result would not parse back to this name, e.g.
                the namespace has no prefix in *variant*, or a dashed
                block would read as block plus element under ``-``
                element delimiters.
        """
        prefix = self._prefix_for(variant)
        if self.namespace is not Namespace.NONE and not prefix:
            msg = f"namespace {self.namespace.value!r} has no prefix in variant {variant.name!r}"
            raise ValueError(msg)

        if variant.element_delimiter_in_identifiers:
            if variant.rule_for(self.namespace).allow_element:
                dashed = [s for s in (self.block, self.element) if s is not None and "-" in s]
                if dashed:
                    msg = f"{dashed[0]!r} is ambiguous with '-' element delimiters"
                    raise ValueError(msg)
            elif self.element is not None:
                msg = f"namespace {self.namespace.value!r} takes no element in {variant.name!r}"
                raise ValueError(msg)

        parts = [prefix, self.block]
        if self.element is not None:
            parts.append(f"{variant.element_delimiter}{self.element}")
        if self.modifier is not None:
            parts.append(f"{variant.modifier_delimiter}{self.modifier}")
        rendered = "".join(parts)

        scanned = next(
            (entry for entry in variant.ordered_prefixes() if rendered.startswith(entry[0])),
            ("", Namespace.NONE),
        )
        if scanned != (prefix, self.namespace):
            msg = f"{rendered!r} would be read with prefix {scanned[0]!r}"
            raise ValueError(msg)
        return rendered

    def _prefix_for(self, variant: NamingVariant) -> str:
        if (self.prefix, self.namespace) in variant.prefixes:
            return self.prefix
        return variant.primary_prefix(self.namespace)
