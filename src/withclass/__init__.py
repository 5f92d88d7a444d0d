"""
withclass - variant-driven class names for UI components.

Wrap a tag or component with ``with_class`` to resolve variant props,
defaults and compound variants into its class attribute on every render.
"""

from withclass._version import get_version
from withclass.class_value import ClassValue, cx, normalize_classes
from withclass.component import ClassedComponent, with_class
from withclass.composer import ClassComposer, Composition, compose
from withclass.compound import resolve_compound
from withclass.errors import ConfigError, ManifestError, WithClassError
from withclass.html import Ref, render, render_element
from withclass.jinja import create_jinja_env, install_jinja
from withclass.manifest import ComponentRegistry, load_manifest, parse_manifest
from withclass.props import CLASS_KEY, is_truthy, partition_props, variant_tag
from withclass.specs import (
    CompoundVariantRule,
    Computed,
    Static,
    VariantAxis,
    WithClassConfig,
    evaluate,
)
from withclass.variants import resolve_variants

__version__ = get_version()

__all__ = [
    "__version__",
    # Components
    "with_class",
    "ClassedComponent",
    "Ref",
    "render",
    "render_element",
    # Configuration
    "WithClassConfig",
    "VariantAxis",
    "CompoundVariantRule",
    "Static",
    "Computed",
    "evaluate",
    # Resolution
    "ClassValue",
    "normalize_classes",
    "cx",
    "resolve_variants",
    "resolve_compound",
    "partition_props",
    "is_truthy",
    "variant_tag",
    "CLASS_KEY",
    "ClassComposer",
    "Composition",
    "compose",
    # Manifest and templates
    "ComponentRegistry",
    "load_manifest",
    "parse_manifest",
    "install_jinja",
    "create_jinja_env",
    # Errors
    "WithClassError",
    "ConfigError",
    "ManifestError",
]
