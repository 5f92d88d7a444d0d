"""Shared pytest fixtures for withclass tests."""

from pathlib import Path

import pytest

from withclass import ClassedComponent, with_class


@pytest.fixture
def action() -> ClassedComponent:
    """Button with a color axis, a boolean axis and default props."""
    return with_class(
        "button",
        classes="button",
        variants={
            "color": {
                "danger": "bg-red-600",
                "primary": "bg-indigo-600",
                "secondary": "bg-gray-300",
            },
            "is_ghost": {True: "opacity-50"},
        },
        default_variants={"color": "primary"},
        other_props={"type": "button"},
    )


@pytest.fixture
def compound_action() -> ClassedComponent:
    """Button whose compound variants depend on defaults and boolean props."""
    return with_class(
        "button",
        classes="button",
        variants={
            "color": {"primary": "text-white"},
            "is_ghost": {True: ""},
            "variant": {"outlined": "", "regular": "", "none": "variant-none"},
        },
        compound_variants=[
            {"color": "primary", "variant": "outlined", "class_name": "bg-indigo-600 border-indigo-600"},
            {"color": "primary", "variant": "regular", "is_ghost": True, "class_name": "bg-indigo-300"},
        ],
        default_variants={"color": "primary", "variant": "none"},
        other_props={"type": "button"},
    )


MANIFEST = """\
[components.button]
tag = "button"
classes = "btn"
other_props = { type = "button" }
default_variants = { color = "primary" }

[components.button.variants.color]
primary = "btn-primary"
danger = "btn-error"

[components.button.variants.is_ghost]
true = "btn-ghost"

[[components.button.compound_variants]]
color = "danger"
is_ghost = true
class_name = "text-error"

[components.badge]
tag = "span"
classes = ["badge", "badge-sm"]
"""


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write a two-component manifest and return its path."""
    path = tmp_path / "withclass.toml"
    path.write_text(MANIFEST)
    return path
