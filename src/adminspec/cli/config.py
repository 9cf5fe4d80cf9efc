"""
Backend configuration commands for adminspec CLI.

Normalize and check admin backend configuration files without starting
the hosting application.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adminspec.core.adminspec_loader import (
    build_backend_spec,
    load_config_files,
    process_backend_configuration,
)
from adminspec.core.errors import AdminSpecError
from adminspec.core.ir import ACTION_ORDER

console = Console()


class OutputFormat(StrEnum):
    """Output formats for the normalized configuration."""

    JSON = "json"
    YAML = "yaml"


ConfigFiles = Annotated[
    list[Path],
    typer.Argument(help="Configuration files, later files override earlier ones"),
]


def _process(files: list[Path]) -> dict[str, Any]:
    try:
        return process_backend_configuration(load_config_files(files))
    except AdminSpecError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e


def _dump(processed: dict[str, Any], output_format: OutputFormat) -> str:
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(processed, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(processed, indent=2, ensure_ascii=False, default=str) + "\n"


def normalize_command(
    files: ConfigFiles,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.JSON,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Print the fully normalized backend configuration."""
    processed = _process(files)
    content = _dump(processed, output_format)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote {len(processed['entities'])} entities to {output}")
    else:
        typer.echo(content, nl=False)


def check_command(files: ConfigFiles) -> None:
    """Validate the backend configuration and summarize its entities."""
    processed = _process(files)

    try:
        spec = build_backend_spec(processed)
    except AdminSpecError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e

    if not spec.entities:
        console.print("[yellow]No entities configured[/yellow]")
        return

    table = Table(title=escape(spec.site_name))
    table.add_column("Name", style="cyan")
    table.add_column("Label")
    table.add_column("Class", style="dim")
    for action in ACTION_ORDER:
        table.add_column(action.value, justify="right")

    for entity in spec.entities.values():
        counts = [str(len(entity.action(action).fields)) for action in ACTION_ORDER]
        table.add_row(escape(entity.name), escape(entity.label), escape(entity.entity_class), *counts)

    console.print(table)
    console.print(f"[green]✓[/green] {len(spec.entities)} entities configured")
