"""Naming variants: the guide's rule sets expressed as immutable data.

The guide evolved through four self-consistent revisions. Each one is a
:class:`NamingVariant`: delimiters, an ordered prefix table, and a
per-namespace rule table. The validator reads these tables and never
branches on the variant name.

INVARIANT: variants are frozen. Extending one with custom namespaces
returns a new variant.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from pydantic import BaseModel, Field

from bemlint.domain.errors import (
    FORBIDS_DESCENDANTS,
    JS_HOOK_ELEMENT,
    JS_HOOK_MODIFIER,
    ConfigError,
)
from bemlint.domain.types import Namespace

CUSTOM_PREFIX_PATTERN = re.compile(r"^[a-z][a-z0-9]*-$")


class NamespaceRule(BaseModel):
    """What a namespace admits after its prefix."""

    model_config = {"frozen": True}

    allow_element: bool = True
    allow_modifier: bool = True
    element_advice: str | None = None
    message: str = FORBIDS_DESCENDANTS


_FREE = NamespaceRule()
_LEAF = NamespaceRule(allow_element=False, allow_modifier=False)


class NamingVariant(BaseModel):
    """One self-consistent set of delimiter and namespace rules."""

    model_config = {"frozen": True}

    name: str
    description: str = ""
    aliases: tuple[str, ...] = ()
    element_delimiter: str = "__"
    modifier_delimiter: str = "--"
    prefixes: tuple[tuple[str, Namespace], ...] = ()
    rules: dict[Namespace, NamespaceRule] = Field(default_factory=dict)
    prefix_required: bool = False

    @property
    def element_delimiter_in_identifiers(self) -> bool:
        """True when the element delimiter is also a legal identifier character."""
        return self.element_delimiter == "-"

    def ordered_prefixes(self) -> list[tuple[str, Namespace]]:
        """Prefix table sorted longest-first (stable for equal lengths)."""
        return sorted(self.prefixes, key=lambda entry: len(entry[0]), reverse=True)

    def namespaces(self) -> list[Namespace]:
        """Namespaces reachable through a prefix, in declaration order."""
        seen: list[Namespace] = []
        for _prefix, namespace in self.prefixes:
            if namespace not in seen:
                seen.append(namespace)
        return seen

    def primary_prefix(self, namespace: Namespace) -> str:
        """First declared prefix for *namespace* (empty for ``none``)."""
        for prefix, ns in self.prefixes:
            if ns is namespace:
                return prefix
        return ""

    def rule_for(self, namespace: Namespace) -> NamespaceRule:
        return self.rules.get(namespace, _FREE)

    def with_custom_namespaces(self, mapping: Mapping[str, str]) -> NamingVariant:
        """Return a copy whose prefix table also maps *mapping*'s prefixes.

        A custom prefix that already exists is remapped.

        Raises:
            ConfigError: a prefix is malformed or a namespace is unknown.
        """
        if not mapping:
            return self
        extra: dict[str, Namespace] = {}
        for prefix, namespace_name in mapping.items():
            if not isinstance(prefix, str) or not CUSTOM_PREFIX_PATTERN.match(prefix):
                msg = f"Invalid custom prefix {prefix!r}: expected lowercase letters ending in '-'"
                raise ConfigError(msg)
            try:
                namespace = Namespace(namespace_name)
            except ValueError as exc:
                msg = f"Unknown namespace {namespace_name!r} for custom prefix {prefix!r}"
                raise ConfigError(msg) from exc
            if namespace is Namespace.NONE:
                msg = f"Custom prefix {prefix!r} cannot map to namespace 'none'"
                raise ConfigError(msg)
            extra[prefix] = namespace

        kept = tuple((p, ns) for p, ns in self.prefixes if p not in extra)
        return self.model_copy(update={"prefixes": kept + tuple(extra.items())})


# ---------------------------------------------------------------------------
# Built-in variants
# ---------------------------------------------------------------------------

DASH_MODIFIER = NamingVariant(
    name="dash-modifier",
    description="Single-dash elements, double-dash modifiers, six namespaces.",
    aliases=("six-namespace",),
    element_delimiter="-",
    prefixes=(
        ("l-", Namespace.LAYOUT),
        ("u-", Namespace.UTILITY),
        ("t-", Namespace.TYPOGRAPHY),
        ("is-", Namespace.STATE),
        ("has-", Namespace.STATE),
        ("js-", Namespace.JS_HOOK),
        ("c-", Namespace.COMPONENT),
    ),
    rules={
        Namespace.LAYOUT: _LEAF,
        Namespace.UTILITY: _LEAF,
        Namespace.TYPOGRAPHY: _LEAF,
        Namespace.STATE: _LEAF,
        Namespace.JS_HOOK: NamespaceRule(
            allow_element=False, allow_modifier=False, message=JS_HOOK_MODIFIER
        ),
        Namespace.COMPONENT: _FREE,
        Namespace.NONE: _FREE,
    },
)

DOUBLE_UNDERSCORE_BEM = NamingVariant(
    name="double-underscore-bem",
    description="Classic BEM delimiters with seven namespaces; unprefixed classes advised.",
    aliases=("seven-namespace-bem",),
    element_delimiter="__",
    prefixes=(
        ("l-", Namespace.LAYOUT),
        ("u-", Namespace.UTILITY),
        ("t-", Namespace.TYPOGRAPHY),
        ("is-", Namespace.STATE),
        ("has-", Namespace.STATE),
        ("js-", Namespace.JS_HOOK),
        ("o-", Namespace.OBJECT),
        ("c-", Namespace.COMPONENT),
    ),
    rules={
        Namespace.LAYOUT: _LEAF,
        Namespace.UTILITY: _LEAF,
        Namespace.TYPOGRAPHY: _LEAF,
        Namespace.STATE: _LEAF,
        Namespace.JS_HOOK: NamespaceRule(
            allow_modifier=False, element_advice=JS_HOOK_ELEMENT, message=JS_HOOK_MODIFIER
        ),
        Namespace.OBJECT: _FREE,
        Namespace.COMPONENT: _FREE,
        Namespace.NONE: _FREE,
    },
    prefix_required=True,
)

BOOTSTRAP_HYBRID = NamingVariant(
    name="bootstrap-hybrid",
    description="BEM on top of Bootstrap; 'a-' abstracts, unprefixed classes are Bootstrap's.",
    element_delimiter="__",
    prefixes=(
        ("l-", Namespace.LAYOUT),
        ("u-", Namespace.UTILITY),
        ("t-", Namespace.TYPOGRAPHY),
        ("is-", Namespace.STATE),
        ("has-", Namespace.STATE),
        ("js-", Namespace.JS_HOOK),
        ("a-", Namespace.OBJECT),
        ("c-", Namespace.COMPONENT),
    ),
    rules=DOUBLE_UNDERSCORE_BEM.rules,
)

BOOTSTRAP_HYBRID_AC = NamingVariant(
    name="bootstrap-hybrid-ac",
    description="Later Bootstrap hybrid; 'ac-' abstract components, state modifiers allowed.",
    element_delimiter="__",
    prefixes=(
        ("l-", Namespace.LAYOUT),
        ("u-", Namespace.UTILITY),
        ("t-", Namespace.TYPOGRAPHY),
        ("is-", Namespace.STATE),
        ("has-", Namespace.STATE),
        ("js-", Namespace.JS_HOOK),
        ("ac-", Namespace.OBJECT),
        ("c-", Namespace.COMPONENT),
    ),
    rules={
        **DOUBLE_UNDERSCORE_BEM.rules,
        Namespace.STATE: NamespaceRule(allow_element=False, allow_modifier=True),
    },
)

_BUILTINS: tuple[NamingVariant, ...] = (
    DASH_MODIFIER,
    DOUBLE_UNDERSCORE_BEM,
    BOOTSTRAP_HYBRID,
    BOOTSTRAP_HYBRID_AC,
)

DEFAULT_VARIANT = DOUBLE_UNDERSCORE_BEM.name


def list_variants() -> list[NamingVariant]:
    """Built-in variants in the order the guide introduced them."""
    return list(_BUILTINS)


def get_variant(name: str) -> NamingVariant:
    """Resolve a built-in variant by name or alias.

    Raises:
        ConfigError: *name* is not a known variant.
    """
    for variant in _BUILTINS:
        if name == variant.name or name in variant.aliases:
            return variant
    known = ", ".join(v.name for v in _BUILTINS)
    msg = f"Unknown naming variant {name!r} (expected one of: {known})"
    raise ConfigError(msg)


def resolve_variant(
    variant: NamingVariant | str,
    custom_namespaces: Mapping[str, str] | None = None,
) -> NamingVariant:
    """Accept a variant or its name and apply custom namespaces."""
    resolved = get_variant(variant) if isinstance(variant, str) else variant
    if not isinstance(resolved, NamingVariant):
        msg = f"Expected a naming variant, got {type(variant).__name__}"
        raise ConfigError(msg)
    return resolved.with_custom_namespaces(custom_namespaces or {})
