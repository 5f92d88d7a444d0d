"""
withclass CLI.

Commands:
- resolve: Print the class string and forwarded props for one render
- render: Print the rendered HTML for one render
- list: Show the components declared in a manifest
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from withclass._version import get_version
from withclass.component import ClassedComponent
from withclass.errors import WithClassError
from withclass.manifest import DEFAULT_MANIFEST, load_manifest

app = typer.Typer(
    help="Resolve variant props into class names for manifest components.",
    no_args_is_help=True,
)
console = Console()

_LITERALS: dict[str, Any] = {"true": True, "false": False, "null": None}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"withclass {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """withclass: variant-driven class names for UI components."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_prop(raw: str) -> tuple[str, Any]:
    """Parse ``key=value``. true/false/null and integers are converted.

    Examples:
        >>> parse_prop("is_ghost=true")
        ('is_ghost', True)
        >>> parse_prop("size=2")
        ('size', 2)
    """
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"Expected key=value, got {raw!r}")
    if value in _LITERALS:
        return key, _LITERALS[value]
    try:
        return key, int(value)
    except ValueError:
        return key, value


def _load_component(manifest: str, name: str) -> ClassedComponent:
    try:
        registry = load_manifest(manifest)
    except WithClassError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    component = registry.get(name)
    if component is None:
        available = ", ".join(registry.names) or "none"
        typer.echo(f"Error: Unknown component '{name}' (available: {available})", err=True)
        raise typer.Exit(code=1)
    return component


@app.command("resolve")
def resolve_command(
    component: str = typer.Argument(..., help="Component name from the manifest"),
    prop: list[str] = typer.Option([], "--prop", "-p", help="Render prop as key=value"),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m"),
    format: str = typer.Option(
        "text", "--format", "-f", help="Output format: text (default) or json"
    ),
) -> None:
    """Resolve the class string and forwarded props of one render.

    Examples:
        withclass resolve button -p color=danger -p is_ghost=true
        withclass resolve button --format json
    """
    target = _load_component(manifest, component)
    props = dict(parse_prop(raw) for raw in prop)
    composition = target.compose(**props)

    if format == "json":
        typer.echo(
            json.dumps(
                {"class_name": composition.class_name, "props": composition.props},
                indent=2,
                default=str,
            )
        )
        return

    typer.echo(composition.class_name)
    forwarded = {k: v for k, v in composition.props.items() if k != "class_name"}
    for key, value in forwarded.items():
        typer.echo(f"  {key} = {value!r}")


@app.command("render")
def render_command(
    component: str = typer.Argument(..., help="Component name from the manifest"),
    prop: list[str] = typer.Option([], "--prop", "-p", help="Render prop as key=value"),
    children: str = typer.Option(None, "--children", "-c", help="Text content"),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m"),
) -> None:
    """Render one component to HTML."""
    target = _load_component(manifest, component)
    props = dict(parse_prop(raw) for raw in prop)
    if children is not None:
        props["children"] = children
    typer.echo(str(target(**props)))


@app.command("list")
def list_command(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m"),
) -> None:
    """List the components declared in a manifest."""
    try:
        registry = load_manifest(manifest)
    except WithClassError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not len(registry):
        typer.echo("No components declared.")
        return

    table = Table(title=f"Components ({registry.source})")
    table.add_column("Name", style="bold")
    table.add_column("Tag")
    table.add_column("Variants")
    table.add_column("Defaults", style="dim")
    table.add_column("Compound", justify="right")

    for name in registry:
        target = registry[name]
        config = target.config
        axes = ", ".join(
            f"{axis.name}[{'|'.join(axis.values)}]" for axis in config.variants
        )
        defaults = ", ".join(f"{k}={v}" for k, v in config.default_variants.items())
        table.add_row(
            name,
            target.display_name,
            axes or "-",
            defaults or "-",
            str(len(config.compound_variants)),
        )

    console.print(table)


def main() -> None:
    app()
