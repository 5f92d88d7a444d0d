"""
Error types for withclass component definition and manifest loading.

Rendering itself never raises for bad data (unknown variant values and
malformed class values degrade silently); these errors only surface when a
component is defined or a manifest is loaded.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class WithClassError(Exception):
    """Base exception for all withclass errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(WithClassError):
    """
    Raised when a component configuration has an invalid shape.

    Examples:
    - Variant axis values that are not a mapping
    - Compound variant rule that is not a mapping
    - Default variant naming an undeclared axis
    """

    pass


class ManifestError(ConfigError):
    """
    Raised when a component manifest cannot be loaded.

    Examples:
    - Missing manifest file
    - Invalid TOML syntax
    - Component entry without a tag
    """

    pass


@dataclass
class ErrorContext:
    """
    Where a configuration error was found.

    Attributes:
        file: Manifest path, if the configuration came from a file
        component: Component name the error belongs to
    """

    file: Path | None = None
    component: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "withclass.toml in component button"
        """
        parts = []
        if self.file:
            parts.append(str(self.file))
        if self.component:
            parts.append(f"in component {self.component}")
        return " ".join(parts)


def make_manifest_error(
    message: str,
    file: Path | None = None,
    component: str | None = None,
) -> ManifestError:
    """
    Helper to create a ManifestError with optional context.

    Args:
        message: Error description
        file: Optional manifest path
        component: Optional component name

    Returns:
        ManifestError with context if a location was provided
    """
    if file or component:
        return ManifestError(message, ErrorContext(file=file, component=component))
    return ManifestError(message)
