"""ClassNameValidator: single-pass parse of a class name against a variant.

Steps, in order:

1. Token check. Non-strings, empty strings and embedded whitespace raise
   :class:`ClassNameSyntaxError`. Nothing else raises.
2. Prefix scan, longest prefix first. No match means namespace ``none``.
3. Modifier split on the variant's modifier delimiter.
4. Element split on the variant's element delimiter. When that delimiter
   is ``-`` it is also an identifier character, so namespaces that admit
   no elements keep the whole remainder as one dashed block.
5. Identifier check on every segment.
6. Namespace rules from the variant's rule table.

Syntax violations stop the parse; semantic and advisory violations
accumulate so one call reports every independent rule break.

INVARIANT: validation is pure. The same input and configuration always
yield an equal result, and validators may be shared across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field

from bemlint.domain.classname import IDENTIFIER_PATTERN, ClassName
from bemlint.domain.errors import (
    INVALID_IDENTIFIER,
    MISSING_PREFIX,
    MULTIPLE_ELEMENTS,
    MULTIPLE_MODIFIERS,
    ClassNameSyntaxError,
)
from bemlint.domain.types import Namespace, Violation, ViolationKind
from bemlint.domain.variants import NamingVariant, resolve_variant


class ValidationResult(BaseModel):
    """Outcome of validating one class name."""

    model_config = {"frozen": True}

    raw: str
    ok: bool
    namespace: Namespace = Namespace.NONE
    prefix: str = ""
    block: str | None = None
    element: str | None = None
    modifier: str | None = None
    violations: list[Violation] = Field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    @property
    def class_name(self) -> ClassName | None:
        """The parsed structure, or None when the parse did not get that far."""
        if not self.block or any(v.kind is ViolationKind.SYNTAX for v in self.violations):
            return None
        return ClassName(
            namespace=self.namespace,
            prefix=self.prefix,
            block=self.block,
            element=self.element,
            modifier=self.modifier,
            raw=self.raw,
        )


def _check_token(raw: object) -> str:
    if not isinstance(raw, str):
        raise ClassNameSyntaxError("class name must be a string", raw)
    if not raw:
        raise ClassNameSyntaxError("empty class name", raw)
    if any(ch.isspace() for ch in raw):
        raise ClassNameSyntaxError("class name contains whitespace", raw)
    return raw


class ClassNameValidator:
    """Validates class names against one naming variant.

    The variant is resolved at construction time, so an unknown variant
    or a malformed custom namespace table fails before any input is seen.

    Usage::

        validator = ClassNameValidator("double-underscore-bem", strict=True)
        result = validator.validate("c-card__title--large")
        assert result.ok
    """

    def __init__(
        self,
        variant: NamingVariant | str,
        *,
        strict: bool = False,
        custom_namespaces: Mapping[str, str] | None = None,
    ) -> None:
        self.variant = resolve_variant(variant, custom_namespaces)
        self.strict = strict
        self._prefixes = self.variant.ordered_prefixes()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, raw: str) -> ValidationResult:
        """Validate a single class name.

        Raises:
            ClassNameSyntaxError: *raw* is not a string, is empty, or
                contains whitespace.
        """
        token = _check_token(raw)
        namespace, prefix, rest = self._scan_prefix(token)
        fields = {"raw": token, "namespace": namespace, "prefix": prefix}

        modifier_parts = rest.split(self.variant.modifier_delimiter)
        if len(modifier_parts) > 2:
            return self._failed(fields, MULTIPLE_MODIFIERS)
        base = modifier_parts[0]
        modifier = modifier_parts[1] if len(modifier_parts) == 2 else None

        rule = self.variant.rule_for(namespace)
        if self.variant.element_delimiter_in_identifiers and not rule.allow_element:
            element_parts = [base]
        else:
            element_parts = base.split(self.variant.element_delimiter)
        if len(element_parts) > 2:
            return self._failed(fields, MULTIPLE_ELEMENTS)
        block = element_parts[0]
        element = element_parts[1] if len(element_parts) == 2 else None

        fields.update(block=block, element=element, modifier=modifier)
        segments = [s for s in (block, element, modifier) if s is not None]
        if not all(IDENTIFIER_PATTERN.match(s) for s in segments):
            return self._failed(fields, INVALID_IDENTIFIER)

        violations: list[Violation] = []
        forbidden_element = element is not None and not rule.allow_element
        forbidden_modifier = modifier is not None and not rule.allow_modifier
        if forbidden_element or forbidden_modifier:
            violations.append(Violation(kind=ViolationKind.SEMANTIC, message=rule.message))
        if element is not None and rule.element_advice:
            violations.append(Violation(kind=ViolationKind.ADVISORY, message=rule.element_advice))
        if namespace is Namespace.NONE and self.variant.prefix_required:
            violations.append(Violation(kind=ViolationKind.ADVISORY, message=MISSING_PREFIX))

        return ValidationResult(ok=self._passes(violations), violations=violations, **fields)

    def validate_many(self, raws: Iterable[object]) -> list[ValidationResult]:
        """Validate a batch, one result per input in input order.

        Never aborts: a malformed token becomes an ``ok=False`` result
        carrying its syntax violation.
        """
        results: list[ValidationResult] = []
        for raw in raws:
            try:
                results.append(self.validate(raw))  # type: ignore[arg-type]
            except ClassNameSyntaxError as exc:
                results.append(
                    ValidationResult(
                        raw=raw if isinstance(raw, str) else repr(raw),
                        ok=False,
                        violations=[Violation(kind=ViolationKind.SYNTAX, message=exc.reason)],
                    )
                )
        return results

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _scan_prefix(self, token: str) -> tuple[Namespace, str, str]:
        for prefix, namespace in self._prefixes:
            if token.startswith(prefix):
                return namespace, prefix, token[len(prefix) :]
        return Namespace.NONE, "", token

    def _passes(self, violations: list[Violation]) -> bool:
        if self.strict:
            return not violations
        return not any(v.blocking for v in violations)

    @staticmethod
    def _failed(fields: dict[str, object], message: str) -> ValidationResult:
        return ValidationResult(
            ok=False,
            violations=[Violation(kind=ViolationKind.SYNTAX, message=message)],
            **fields,  # type: ignore[arg-type]
        )


def validate(
    raw: str,
    variant: NamingVariant | str,
    *,
    strict: bool = False,
    custom_namespaces: Mapping[str, str] | None = None,
) -> ValidationResult:
    """Validate *raw* under *variant* (a :class:`NamingVariant` or its name).

    Raises:
        ConfigError: unknown variant or malformed custom namespaces.
        ClassNameSyntaxError: malformed input token.
    """
    validator = ClassNameValidator(variant, strict=strict, custom_namespaces=custom_namespaces)
    return validator.validate(raw)
