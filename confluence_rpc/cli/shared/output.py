"""Rendering of call results for the CLI."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from confluence_rpc.errors import is_failure


def exit_on_failure(console: Console, result: Any) -> Any:
    """Print a failed call result in red and exit 1; pass successes through."""
    if is_failure(result):
        console.print(f"[red]Error:[/red] {result}")
        raise typer.Exit(1)
    return result


def print_result(console: Console, result: Any) -> None:
    exit_on_failure(console, result)
    if isinstance(result, dict):
        console.print(struct_table(result))
    else:
        console.print(json.dumps(result, indent=2, ensure_ascii=False, default=str))


def struct_table(record: dict[str, Any], title: str | None = None) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key in sorted(record):
        value = record[key]
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False, default=str)
        table.add_row(str(key), str(value))
    return table
