"""
Classed components.

``with_class`` wraps a tag name or a component callable so that each call
resolves its variant props into a class string and forwards everything
else, including a ``ref``, to the wrapped unit.

Example:
    Action = with_class(
        "button",
        classes="btn flex-1",
        variants={
            "color": {
                "danger": "bg-red-600 hover:bg-red-700",
                "primary": "bg-indigo-600 hover:bg-indigo-700",
            },
            "is_ghost": {True: "opacity-50"},
        },
        default_variants={"color": "primary"},
        other_props={"type": "button"},
    )

    Action("Delete", color="danger", is_ghost=True)
    # <button type="button" class="btn flex-1 bg-red-600 hover:bg-red-700 opacity-50">Delete</button>
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from withclass.composer import ClassComposer, Composition
from withclass.errors import ConfigError
from withclass.html import CHILDREN_KEY, render
from withclass.specs import WithClassConfig

Renderer = Callable[[Any, dict[str, Any], Any], Any]


def display_name_of(component: Any) -> str:
    """Name shown for a component: the tag, or the component's own name."""
    if isinstance(component, str):
        return component
    name = getattr(component, "display_name", None) or getattr(component, "__name__", None)
    return name or type(component).__name__


def passthrough_metadata(component: Any) -> dict[str, Any]:
    """Copy public, non-method attributes of a component.

    Nested sub-components (``Card.Header``) and markers set on component
    functions are carried over to the wrapper this way.
    """
    if isinstance(component, ClassedComponent):
        return dict(component.metadata)
    if isinstance(component, str) or not hasattr(component, "__dict__"):
        return {}
    metadata: dict[str, Any] = {}
    for key, value in vars(component).items():
        if key.startswith("_") or key == "display_name":
            continue
        if inspect.isroutine(value) or isinstance(value, (property, classmethod, staticmethod)):
            continue
        metadata[key] = value
    return metadata


class ClassedComponent:
    """A component whose class attribute is resolved from variant props."""

    def __init__(
        self,
        component: str | Callable[..., Any],
        config: WithClassConfig,
        renderer: Renderer | None = None,
    ):
        self.component = component
        self.config = config
        self.composer = ClassComposer(config)
        self.display_name = display_name_of(component)
        self.metadata = passthrough_metadata(component)
        self._renderer = renderer or render

    @property
    def variant_names(self) -> tuple[str, ...]:
        return self.config.axis_names

    def compose(self, **props: Any) -> Composition:
        """Resolve class names and forwarded props without rendering."""
        return self.composer.compose(props)

    def __call__(self, *children: Any, ref: Any = None, **props: Any) -> Any:
        if children:
            if CHILDREN_KEY in props:
                raise TypeError(f"{self.display_name}: children given both positionally and by keyword")
            props[CHILDREN_KEY] = children[0] if len(children) == 1 else list(children)
        composition = self.composer.compose(props)
        return self._renderer(self.component, composition.props, ref)

    def __getattr__(self, name: str) -> Any:
        metadata = self.__dict__.get("metadata", {})
        if name in metadata:
            return metadata[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"<ClassedComponent {self.display_name} variants={list(self.variant_names)}>"


def with_class(
    component: str | Callable[..., Any],
    config: WithClassConfig | None = None,
    *,
    classes: Any = None,
    variants: Any = None,
    compound_variants: Any = None,
    default_variants: Any = None,
    other_props: Any = None,
    renderer: Renderer | None = None,
) -> ClassedComponent:
    """
    Wrap a component so variant props resolve into its class attribute.

    Args:
        component: HTML tag name or component callable
        config: Prebuilt configuration (keyword options are ignored when given)
        classes: Classes always applied, or a function of the merged props
        variants: ``{axis: {value: classes}}`` or a list of VariantAxis
        compound_variants: Rules adding classes for combinations of axis values
        default_variants: Axis values used when the prop is omitted
        other_props: Default props, or a function of the caller props
        renderer: Replaces the HTML renderer (tests, other hosts)

    Returns:
        ClassedComponent

    Raises:
        ConfigError: If the configuration is invalid
    """
    if config is None:
        try:
            config = WithClassConfig(
                classes=classes,
                variants=variants,
                compound_variants=compound_variants,
                default_variants=default_variants,
                other_props=other_props,
            )
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration for {display_name_of(component)}: {e}"
            ) from e
    return ClassedComponent(component, config, renderer=renderer)
