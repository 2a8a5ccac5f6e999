"""
CLI: ``sparc-init config`` — configuration inspection.
"""

from __future__ import annotations

import typer
from rich.table import Table

from sparc_init.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show the effective settings."""
    from sparc_init.settings import get_settings

    try:
        settings = get_settings(_force_reload=True)
    except ValueError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(1) from e

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in sorted(settings.model_dump().items()):
            console.print(f"SPARC_{key.upper()}={'' if value is None else value}", highlight=False)
        return

    if format != "table":
        console.print(f"[red]Error:[/red] unknown format {format!r}")
        raise typer.Exit(1)

    table = Table(title="sparc-init settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in sorted(settings.model_dump().items()):
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)
