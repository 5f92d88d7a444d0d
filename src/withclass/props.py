"""
Property bag helpers.

A property bag is a plain ``dict[str, Any]`` of render properties. The
helpers here are the only places that look at the kind of a property value:
``is_truthy`` for boolean variant axes and ``variant_tag`` for everything
else.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

PropertyBag = dict[str, Any]

# Conventional property carrying the class attribute.
CLASS_KEY = "class_name"

TRUE_TAG = "true"
FALSE_TAG = "false"


def is_truthy(value: Any) -> bool:
    """Truthiness test used by boolean variant axes and compound rules.

    Falsy values are ``None``, ``False``, zero, NaN and the empty string.
    Every other value is truthy, including empty containers such as ``{}``
    and ``[]``, which differs from Python's ``bool()``.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    return True


def variant_tag(value: Any) -> str | None:
    """Return the value-tag form of a primitive, or None if it has none.

    Examples:
        >>> variant_tag(True)
        'true'
        >>> variant_tag(2.0)
        '2'
        >>> variant_tag({}) is None
        True
    """
    if isinstance(value, bool):
        return TRUE_TAG if value else FALSE_TAG
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


def get_class_name(props: Mapping[str, Any] | None) -> Any:
    """Return the raw class value stored on a property bag, if any."""
    if not props:
        return None
    return props.get(CLASS_KEY)


def merge_props(base: Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> PropertyBag:
    """Shallow merge of two property bags, ``overrides`` winning per key."""
    merged: PropertyBag = dict(base or {})
    merged.update(overrides)
    return merged


def partition_props(props: Mapping[str, Any], axis_names: Iterable[str]) -> PropertyBag:
    """Drop declared variant axis keys, keeping every other key untouched."""
    excluded = frozenset(axis_names)
    return {key: value for key, value in props.items() if key not in excluded}
