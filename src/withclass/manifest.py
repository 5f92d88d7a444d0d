"""
Component manifest loading.

Components can be declared in a ``withclass.toml`` file:

    [components.button]
    tag = "button"
    classes = "btn"
    other_props = { type = "button" }
    default_variants = { color = "primary" }

    [components.button.variants.color]
    primary = "btn-primary"
    danger = "btn-error"

    [[components.button.compound_variants]]
    color = "primary"
    outlined = true
    class_name = "btn-outline"
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from withclass.component import ClassedComponent
from withclass.errors import make_manifest_error
from withclass.specs import WithClassConfig

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "withclass.toml"


class ComponentEntry(BaseModel):
    """One ``[components.<name>]`` table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: str = Field(description="HTML tag rendered by the component")
    classes: Any = Field(default=None, description="Classes always applied")
    variants: dict[str, dict[str, Any]] = Field(default_factory=dict)
    compound_variants: list[dict[str, Any]] = Field(default_factory=list)
    default_variants: dict[str, Any] = Field(default_factory=dict)
    other_props: dict[str, Any] = Field(default_factory=dict)

    def to_config(self) -> WithClassConfig:
        return WithClassConfig(
            classes=self.classes,
            variants=self.variants,
            compound_variants=self.compound_variants,
            default_variants=self.default_variants,
            other_props=self.other_props,
        )


@dataclass
class ComponentRegistry:
    """Named components loaded from a manifest, in file order."""

    components: dict[str, ClassedComponent] = field(default_factory=dict)
    source: Path | None = None

    def get(self, name: str) -> ClassedComponent | None:
        return self.components.get(name)

    def __getitem__(self, name: str) -> ClassedComponent:
        return self.components[name]

    def __contains__(self, name: object) -> bool:
        return name in self.components

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def names(self) -> list[str]:
        return list(self.components)


def parse_manifest(data: Mapping[str, Any], path: Path | None = None) -> ComponentRegistry:
    """
    Build a registry from already-parsed manifest data.

    Raises:
        ManifestError: If a component entry is invalid
    """
    tables = data.get("components", {})
    if not isinstance(tables, Mapping):
        raise make_manifest_error("[components] must be a table", file=path)

    registry = ComponentRegistry(source=path)
    for name, table in tables.items():
        try:
            entry = ComponentEntry.model_validate(table)
            config = entry.to_config()
        except ValidationError as e:
            raise make_manifest_error(str(e), file=path, component=name) from e
        registry.components[name] = ClassedComponent(entry.tag, config)
    return registry


def load_manifest(path: Path | str = DEFAULT_MANIFEST) -> ComponentRegistry:
    """
    Load a component manifest from a TOML file.

    Args:
        path: Manifest path (default: ./withclass.toml)

    Returns:
        ComponentRegistry with one ClassedComponent per entry

    Raises:
        ManifestError: If the file is missing, not valid TOML, or invalid
    """
    path = Path(path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise make_manifest_error("Manifest not found", file=path) from e
    except tomllib.TOMLDecodeError as e:
        raise make_manifest_error(f"Invalid TOML: {e}", file=path) from e

    registry = parse_manifest(data, path)
    logger.info("Loaded %d components from %s", len(registry), path)
    return registry
