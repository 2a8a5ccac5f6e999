"""
CLI utility helpers: consoles, logging setup and result rendering.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from sparc_init.logging import configure_logging
from sparc_init.result import OperationResult
from sparc_init.settings import SparcSettings

console = Console()
err_console = Console(stderr=True)


def setup_logging(settings: SparcSettings, *, verbose: bool = False) -> None:
    """Configure structlog from settings; ``--verbose`` forces DEBUG."""
    level = "DEBUG" if verbose else settings.log_level
    configure_logging(level=level, json_format=settings.log_json)


def fail_on_error(result: OperationResult, *, as_json: bool = False) -> None:
    """Print a failed result and exit with code 1; no-op on success."""
    if result.success:
        return

    if as_json:
        console.print_json(json.dumps(result.to_dict(), default=str))
        raise typer.Exit(code=1)

    err = result.error
    msg = err.message if err else "Unknown error"
    code = err.code if err else "ERROR"
    err_console.print(f"[bold red]Error[/bold red] ({code}): {msg}")
    if err is not None:
        for key in ("missing_files", "missing_dirs", "conflicts"):
            for item in err.details.get(key, []):
                err_console.print(f"  - {item}")
    raise typer.Exit(code=1)


def print_warnings(warnings: list[str]) -> None:
    for w in warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {w}")
