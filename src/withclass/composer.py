"""
Per-render composition of class names and forwarded props.

Class order is fixed: default-props class, caller class, static classes,
variant classes (axis order), compound classes (rule order).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from withclass.class_value import normalize_classes
from withclass.compound import resolve_compound
from withclass.props import (
    CLASS_KEY,
    PropertyBag,
    get_class_name,
    merge_props,
    partition_props,
)
from withclass.specs import WithClassConfig, evaluate
from withclass.variants import resolve_variants


@dataclass(frozen=True)
class Composition:
    """Result of one render: ordered class tokens plus the props to forward."""

    class_names: tuple[str, ...]
    props: PropertyBag = field(default_factory=dict)

    @property
    def class_name(self) -> str:
        return " ".join(self.class_names)


class ClassComposer:
    """Applies a WithClassConfig to the props of a single render."""

    def __init__(self, config: WithClassConfig):
        self.config = config

    def base_props(self, props: Mapping[str, Any]) -> PropertyBag:
        """Evaluate the configured default props against the caller props."""
        return dict(evaluate(self.config.other_props, props) or {})

    def class_names(
        self,
        base: Mapping[str, Any],
        props: Mapping[str, Any],
        merged: Mapping[str, Any],
    ) -> tuple[str, ...]:
        config = self.config
        return normalize_classes(
            [
                get_class_name(base),
                get_class_name(props),
                evaluate(config.classes, merged),
                resolve_variants(config.variants, config.default_variants, merged),
                resolve_compound(config.compound_variants, config.default_variants, merged),
            ]
        )

    def compose(self, props: Mapping[str, Any]) -> Composition:
        """Compute the class names and forwarded props for one render."""
        base = self.base_props(props)
        merged = merge_props(base, props)
        class_names = self.class_names(base, props, merged)

        forwarded = partition_props(merged, self.config.axis_names)
        forwarded[CLASS_KEY] = " ".join(class_names)
        return Composition(class_names=class_names, props=forwarded)


def compose(config: WithClassConfig, props: Mapping[str, Any]) -> Composition:
    """Compose one render without keeping a composer around."""
    return ClassComposer(config).compose(props)
