"""
Class value normalization.

A class value is a string, ``None``, a sequence of class values (any depth),
or a ``{token: condition}`` mapping. Normalizing flattens it into an ordered
tuple of non-empty tokens. Order is preserved and duplicates are kept.

Examples:
    >>> normalize_classes(["btn", None, ["btn-sm", False], {"active": True}])
    ('btn', 'btn-sm', 'active')

    >>> cx("btn", ["btn-primary", ""], 0)
    'btn btn-primary'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from withclass.props import is_truthy

# Recursive in practice: str | None | bool | Mapping[str, Any] | Iterable[ClassValue]
ClassValue = Any


def _iter_tokens(value: ClassValue) -> Iterator[str]:
    if value is None or isinstance(value, bool):
        return
    if isinstance(value, str):
        if value:
            yield value
        return
    if isinstance(value, (int, float)):
        if value:
            yield str(value)
        return
    if isinstance(value, Mapping):
        for token, condition in value.items():
            if token and is_truthy(condition):
                yield str(token)
        return
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        for item in value:
            yield from _iter_tokens(item)
        return
    # Unknown objects pass through as one opaque token
    token = str(value)
    if token:
        yield token


def normalize_classes(value: ClassValue) -> tuple[str, ...]:
    """Flatten a class value into an ordered tuple of non-empty tokens."""
    return tuple(_iter_tokens(value))


def cx(*values: ClassValue) -> str:
    """Normalize all arguments and join them with a single space."""
    return " ".join(normalize_classes(values))
