"""
Variant resolution.

For each declared axis, picks one candidate value (the prop, else the
default) and maps it to that axis' class value. An explicit value that
matches nothing contributes nothing; the default is not tried again.

Examples:
    >>> axes = [VariantAxis(name="color", values={"primary": "bg-indigo-600"})]
    >>> resolve_variants(axes, {"color": "primary"}, {})
    [('bg-indigo-600',)]
    >>> resolve_variants(axes, {"color": "primary"}, {"color": "unknown"})
    []
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from withclass.class_value import ClassValue
from withclass.specs import VariantAxis

logger = logging.getLogger(__name__)


def candidate_value(name: str, defaults: Mapping[str, Any], props: Mapping[str, Any]) -> Any:
    """Get the raw value used for an axis: the prop if set, else the default.

    A prop explicitly set to None counts as omitted.
    """
    value = props.get(name)
    if value is None:
        value = defaults.get(name)
    return value


def effective_variants(
    axes: Sequence[VariantAxis],
    defaults: Mapping[str, Any] | None,
    props: Mapping[str, Any],
) -> dict[str, str]:
    """Map each axis with a usable candidate to the value-tag it selects."""
    defaults = defaults or {}
    effective: dict[str, str] = {}
    for axis in axes:
        value = candidate_value(axis.name, defaults, props)
        if value is None:
            continue
        tag = axis.tag_for(value)
        if tag is not None:
            effective[axis.name] = tag
    return effective


def resolve_variants(
    axes: Sequence[VariantAxis],
    defaults: Mapping[str, Any] | None,
    props: Mapping[str, Any],
) -> list[ClassValue]:
    """Resolve per-axis class values, in axis declaration order."""
    by_name = {axis.name: axis for axis in axes}
    contributions: list[ClassValue] = []
    for name, tag in effective_variants(axes, defaults, props).items():
        classes = by_name[name].values.get(tag)
        if classes is None:
            logger.debug("Variant %s has no classes for %r", name, tag)
            continue
        contributions.append(classes)
    return contributions
