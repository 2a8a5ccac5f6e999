"""
CLI: ``sparc-init validate`` — check an existing project structure.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from sparc_init.cli.utils import console, fail_on_error
from sparc_init.ops import validate_project


def validate_command(
    project_id: str = typer.Option(..., "--id", "-i", help="Project ID to check."),
    directory: Path = typer.Option(Path("."), "--directory", "-d", help="Project root."),
    as_json: bool = typer.Option(False, "--json", help="Output the report as JSON."),
) -> None:
    """Verify that required files and directories exist."""
    result = validate_project(directory, project_id)
    fail_on_error(result, as_json=as_json)

    if as_json:
        console.print_json(json.dumps(result.to_dict(), default=str))
        return
    console.print("[green]✓[/green] Project setup validation passed")
