"""
Configuration types for classed components.

Defines variant axes, compound variant rules and the per-component
configuration. Everything here is fixed when a component is defined and
never changes afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from withclass.class_value import normalize_classes
from withclass.props import CLASS_KEY, FALSE_TAG, TRUE_TAG, is_truthy, variant_tag

# =============================================================================
# Static / Computed values
# =============================================================================


@dataclass(frozen=True)
class Static:
    """A configuration value that does not depend on props."""

    value: Any = None


@dataclass(frozen=True)
class Computed:
    """A configuration value computed from the render props."""

    fn: Callable[[Mapping[str, Any]], Any]


ValueSource = Static | Computed


def as_source(value: Any) -> ValueSource:
    """Wrap a plain value or callable into a Static / Computed source."""
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Static(value)


def evaluate(source: ValueSource, props: Mapping[str, Any]) -> Any:
    """Resolve a Static / Computed source for one render."""
    if isinstance(source, Computed):
        return source.fn(props)
    return source.value


# =============================================================================
# Variants
# =============================================================================


class VariantAxis(BaseModel):
    """
    A named dimension of visual variation.

    Example:
        VariantAxis(name="color", values={"primary": "btn-primary", "danger": "btn-error"})
        VariantAxis(name="is_ghost", values={True: "opacity-50"})
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Axis name, also the prop name")
    values: dict[str, Any] = Field(
        default_factory=dict, description="Value-tag to class value mapping"
    )

    @field_validator("values", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> dict[str, Any]:
        """Convert boolean and numeric keys to their value-tag form."""
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            raise ValueError(f"Variant values must be a mapping, got {type(v).__name__}")
        tags: dict[str, Any] = {}
        for key, classes in v.items():
            tag = variant_tag(key)
            if tag is None:
                raise ValueError(f"Variant value {key!r} must be a string, boolean or number")
            tags[tag] = None if classes is None else normalize_classes(classes)
        return tags

    @property
    def is_boolean(self) -> bool:
        """Check if values are selected by truthiness rather than by tag."""
        return TRUE_TAG in self.values or FALSE_TAG in self.values

    def tag_for(self, value: Any) -> str | None:
        """Get the tag a prop value selects on this axis."""
        if self.is_boolean:
            return TRUE_TAG if is_truthy(value) else FALSE_TAG
        return variant_tag(value)


class CompoundVariantRule(BaseModel):
    """
    Extra classes applied when several axes hold given values at once.

    Accepts the flat form used in configuration, where every key except
    ``class_name`` is a requirement.

    Example:
        CompoundVariantRule.model_validate(
            {"color": "primary", "is_ghost": True, "class_name": "bg-indigo-300"}
        )
    """

    model_config = ConfigDict(frozen=True)

    conditions: dict[str, Any] = Field(
        default_factory=dict, description="Axis name to required value-tag or boolean"
    )
    class_name: Any = Field(default=None, description="Class value applied on match")

    @model_validator(mode="before")
    @classmethod
    def split_flat_rule(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValueError(f"Compound variant must be a mapping, got {type(data).__name__}")
        if "conditions" in data:
            return data
        conditions = {key: value for key, value in data.items() if key != CLASS_KEY}
        return {"conditions": conditions, "class_name": data.get(CLASS_KEY)}

    @field_validator("class_name")
    @classmethod
    def freeze_class_name(cls, v: Any) -> tuple[str, ...]:
        return normalize_classes(v)

    @field_validator("conditions")
    @classmethod
    def validate_requirements(cls, v: dict[str, Any]) -> dict[str, Any]:
        for axis, required in v.items():
            if required is not None and variant_tag(required) is None:
                raise ValueError(
                    f"Compound requirement {axis}={required!r} must be a string, boolean or number"
                )
        return v


# =============================================================================
# Component configuration
# =============================================================================


class WithClassConfig(BaseModel):
    """
    Full configuration of a classed component.

    Example:
        WithClassConfig(
            classes="btn",
            variants={"color": {"primary": "btn-primary", "danger": "btn-error"}},
            default_variants={"color": "primary"},
            other_props={"type": "button"},
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    classes: ValueSource = Field(
        default_factory=Static, description="Classes always applied (value or function of props)"
    )
    variants: list[VariantAxis] = Field(
        default_factory=list, description="Variant axes, in declaration order"
    )
    compound_variants: list[CompoundVariantRule] = Field(
        default_factory=list, description="Compound rules, in declaration order"
    )
    default_variants: dict[str, Any] = Field(
        default_factory=dict, description="Axis values used when a prop is omitted"
    )
    other_props: ValueSource = Field(
        default_factory=Static, description="Default props (value or function of props)"
    )

    @field_validator("classes", mode="before")
    @classmethod
    def freeze_classes(cls, v: Any) -> ValueSource:
        """Static classes are normalized once, so iterators and later edits cannot leak."""
        source = as_source(v)
        if isinstance(source, Static):
            return Static(normalize_classes(source.value))
        return source

    @field_validator("other_props", mode="before")
    @classmethod
    def freeze_other_props(cls, v: Any) -> ValueSource:
        source = as_source(v)
        if isinstance(source, Computed) or source.value is None:
            return source
        if not isinstance(source.value, Mapping):
            raise ValueError(
                f"other_props must be a mapping or a function, got {type(source.value).__name__}"
            )
        return Static(MappingProxyType(dict(source.value)))

    @field_validator("variants", mode="before")
    @classmethod
    def expand_variant_mapping(cls, v: Any) -> Any:
        """Accept ``{axis: {tag: classes}}`` as well as a list of axes."""
        if v is None:
            return []
        if isinstance(v, Mapping):
            return [{"name": name, "values": values} for name, values in v.items()]
        return v

    @field_validator("compound_variants", mode="before")
    @classmethod
    def default_rules(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("default_variants", mode="before")
    @classmethod
    def default_defaults(cls, v: Any) -> Any:
        return {} if v is None else v

    @model_validator(mode="after")
    def check_axes(self) -> WithClassConfig:
        names = [axis.name for axis in self.variants]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate variant axes: {', '.join(duplicates)}")
        unknown = sorted(set(self.default_variants) - set(names))
        if unknown:
            raise ValueError(f"Default variants for undeclared axes: {', '.join(unknown)}")
        return self

    @property
    def axis_names(self) -> tuple[str, ...]:
        """Declared axis names, in declaration order."""
        return tuple(axis.name for axis in self.variants)

    def get_axis(self, name: str) -> VariantAxis | None:
        """Get variant axis by name."""
        for axis in self.variants:
            if axis.name == name:
                return axis
        return None
