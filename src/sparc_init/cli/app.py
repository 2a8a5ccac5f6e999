"""
Root Typer application for the sparc-init CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from sparc_init.cli.utils import err_console, setup_logging
from sparc_init.settings import get_settings

app = Typer(
    name="sparc-init",
    help="sparc-init — scaffold SPARC methodology projects with a memory bank.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from sparc_init import __version__

        typer.echo(f"sparc-init {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """sparc-init CLI — create and check SPARC project structures."""
    try:
        settings = get_settings()
    except ValueError as e:
        err_console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(1) from e
    setup_logging(settings, verbose=verbose)


# ── Command registration ─────────────────────────────────────────────────

from sparc_init.cli.config import app as config_app  # noqa: E402
from sparc_init.cli.init import init_command  # noqa: E402
from sparc_init.cli.validate import validate_command  # noqa: E402

app.command("init", help="Create a SPARC project structure.")(init_command)
app.command("validate", help="Check an existing project for required files.")(validate_command)
app.add_typer(config_app, name="config", help="Configuration inspection.")
