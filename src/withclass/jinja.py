"""
Jinja2 integration.

Registers classed components as template globals, plus a ``cx`` global and
filter for ad-hoc class lists:

    {{ Button("Save", color="danger") }}
    <div class="{{ ['card', none, {'card-active': active}] | cx }}">
"""

from __future__ import annotations

from collections.abc import Mapping

from jinja2 import Environment, select_autoescape

from withclass.class_value import cx
from withclass.component import ClassedComponent


def install_jinja(
    env: Environment,
    components: Mapping[str, ClassedComponent] | None = None,
) -> Environment:
    """Register components and the ``cx`` helper on an existing environment."""
    env.globals["cx"] = cx
    env.filters["cx"] = cx
    for name, component in (components or {}).items():
        env.globals[name] = component
    return env


def create_jinja_env(
    components: Mapping[str, ClassedComponent] | None = None,
    **options,
) -> Environment:
    """Create an autoescaping environment with components installed."""
    options.setdefault("autoescape", select_autoescape(["html"], default_for_string=True))
    return install_jinja(Environment(**options), components)
