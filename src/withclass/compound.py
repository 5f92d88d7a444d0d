"""
Compound variant resolution.

Rules are matched against the defaulted view of the props and every
matching rule contributes its classes, in declaration order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from withclass.class_value import ClassValue
from withclass.props import PropertyBag, is_truthy, variant_tag
from withclass.specs import CompoundVariantRule


def effective_props(defaults: Mapping[str, Any] | None, props: Mapping[str, Any]) -> PropertyBag:
    """Overlay props on the defaults. Props set to None do not hide a default."""
    effective: PropertyBag = dict(defaults or {})
    effective.update((key, value) for key, value in props.items() if value is not None)
    return effective


def requirement_met(required: Any, actual: Any) -> bool:
    """Check one axis requirement of a compound rule."""
    if isinstance(required, bool):
        return is_truthy(actual) == required
    if required is None:
        return actual is None
    if actual is None:
        return False
    return variant_tag(actual) == variant_tag(required)


def rule_matches(rule: CompoundVariantRule, effective: Mapping[str, Any]) -> bool:
    """Check every requirement of a rule. A rule without requirements never matches."""
    if not rule.conditions:
        return False
    return all(
        requirement_met(required, effective.get(axis))
        for axis, required in rule.conditions.items()
    )


def resolve_compound(
    rules: Sequence[CompoundVariantRule],
    defaults: Mapping[str, Any] | None,
    props: Mapping[str, Any],
) -> list[ClassValue]:
    """Collect the classes of every matching rule, in declaration order."""
    if not rules:
        return []
    effective = effective_props(defaults, props)
    return [rule.class_name for rule in rules if rule_matches(rule, effective)]
