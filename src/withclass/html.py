"""
HTML rendering host.

Renders tag-based components to ``markupsafe.Markup`` and forwards props
and refs to callable components.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup, escape

from withclass.props import CLASS_KEY

logger = logging.getLogger(__name__)

CHILDREN_KEY = "children"

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Python-safe prop names that map to reserved attribute names
_ATTRIBUTE_ALIASES = {
    CLASS_KEY: "class",
    "html_for": "for",
}


@dataclass
class Ref:
    """Handle that receives the rendered element."""

    current: Any = None


def assign_ref(ref: Any, value: Any) -> None:
    """Hand a rendered element to a Ref or a callback ref."""
    if ref is None:
        return
    if isinstance(ref, Ref):
        ref.current = value
    elif callable(ref):
        ref(value)
    else:
        raise TypeError(f"ref must be a Ref or a callable, got {type(ref).__name__}")


def attribute_name(prop: str) -> str:
    """Map a prop name to its HTML attribute name.

    Examples:
        >>> attribute_name("class_name")
        'class'
        >>> attribute_name("aria_label")
        'aria-label'
    """
    if prop in _ATTRIBUTE_ALIASES:
        return _ATTRIBUTE_ALIASES[prop]
    return prop.rstrip("_").replace("_", "-")


def render_attributes(props: Mapping[str, Any]) -> Markup:
    parts: list[str] = []
    for key, value in props.items():
        if key == CHILDREN_KEY or value is None or value is False:
            continue
        if key == CLASS_KEY and value == "":
            continue
        if callable(value):
            logger.debug("Dropping unrenderable attribute %s", key)
            continue
        name = attribute_name(key)
        if value is True:
            parts.append(f" {escape(name)}")
        else:
            parts.append(f' {escape(name)}="{escape(value)}"')
    return Markup("".join(parts))


def render_children(children: Any) -> Markup:
    """Render children: text is escaped, Markup kept, sequences flattened."""
    if children is None or isinstance(children, bool):
        return Markup("")
    if hasattr(children, "__html__") or isinstance(children, (str, int, float)):
        return escape(children)
    if isinstance(children, Iterable):
        return Markup("").join(render_children(child) for child in children)
    return escape(str(children))


def render_element(tag: str, props: Mapping[str, Any]) -> Markup:
    """Render one HTML element from its props."""
    attributes = render_attributes(props)
    if tag.lower() in VOID_ELEMENTS:
        return Markup(f"<{tag}{attributes}>")
    children = render_children(props.get(CHILDREN_KEY))
    return Markup(f"<{tag}{attributes}>{children}</{tag}>")


def render(component: str | Callable[..., Any], props: Mapping[str, Any], ref: Any = None) -> Any:
    """Render a tag or call a component with the forwarded props and ref."""
    if isinstance(component, str):
        element = render_element(component, props)
        assign_ref(ref, element)
        return element
    if not callable(component):
        raise TypeError(f"Cannot render {component!r}: expected a tag name or a callable")
    if ref is None:
        return component(**props)
    return component(ref=ref, **props)
