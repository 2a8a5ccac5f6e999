"""
CLI: ``sparc-init init`` — scaffold a new SPARC project.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.panel import Panel

from sparc_init.cli.utils import console, fail_on_error, print_warnings, setup_logging
from sparc_init.layout import CONFIG_FILES, MEMORY_BANK_FILES
from sparc_init.ops import InitProjectRequest, init_project
from sparc_init.scaffold import ScaffoldReport
from sparc_init.settings import get_settings

_MEMORY_BANK_NOTES = {
    "memory-bank/activeContext.md": "current working context",
    "memory-bank/decisionLog.md": "architectural decisions",
    "memory-bank/productContext.md": "business knowledge",
    "memory-bank/progress.md": "status tracking",
    "memory-bank/systemPatterns.md": "technical patterns",
}

_CONFIG_NOTES = {
    ".roomodes": "custom mode definitions",
    ".rooignore": "security and access control",
    ".roo/mcp.json": "MCP server configuration",
    ".roo/rules/project.md": "project rules",
}


def init_command(
    name: str = typer.Option(..., "--name", "-n", help="Project name."),
    project_id: str | None = typer.Option(
        None, "--id", "-i", help="Project ID (generated from the name if omitted)."
    ),
    directory: Path = typer.Option(
        Path("."), "--directory", "-d", help="Directory to scaffold into.", file_okay=False
    ),
    modes_file: Path | None = typer.Option(
        None, "--modes-file", help="custom_modes.yaml to copy to .roomodes."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be created."),
    as_json: bool = typer.Option(False, "--json", help="Output the report as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Create a complete SPARC project structure."""
    if verbose:
        setup_logging(get_settings(), verbose=True)
    request = InitProjectRequest(
        name=name,
        project_id=project_id,
        directory=directory,
        modes_file=modes_file,
        force=force,
        dry_run=dry_run,
    )
    if not as_json:
        console.print(f"[blue][INFO][/blue] Initializing SPARC project: {name}")

    result = init_project(request)
    fail_on_error(result, as_json=as_json)

    if as_json:
        console.print_json(json.dumps(result.to_dict(), default=str))
        return

    print_warnings(result.warnings)
    report = result.data
    if report.dry_run:
        _print_plan(report)
    else:
        _print_summary(report)


def _print_plan(report: ScaffoldReport) -> None:
    console.print(
        f"[bold]Dry run[/bold] for {report.project.name} ({report.project.project_id}) "
        f"in {report.root}"
    )
    console.print(f"\n[bold]Directories to create:[/bold] {len(report.created_dirs)}")
    for d in report.created_dirs:
        console.print(f"  {d}/")
    console.print(f"\n[bold]Files to write:[/bold] {len(report.written_files)}")
    for f in report.written_files:
        console.print(f"  {f}")


def _print_summary(report: ScaffoldReport) -> None:
    """Completion summary printed after a successful scaffold."""
    project = report.project
    console.print("[green][SUCCESS][/green] SPARC project initialization complete!\n")
    console.print(
        Panel.fit("PROJECT CREATED SUCCESSFULLY", style="bold green", padding=(0, 20))
    )

    console.print("\n📋 [bold]Project Details[/bold]")
    console.print(f"   Name: {project.name}")
    console.print(f"   ID: {project.project_id}")
    console.print(f"   SPARC Version: {project.template_version}")

    console.print("\n📁 [bold]Structure Created[/bold]")
    console.print(f"   ✅ {len(report.created_dirs)} new directories")
    console.print("   ✅ Memory Bank with core knowledge files")
    console.print("   ✅ Configuration files (.roomodes, .rooignore, .roo/)")
    console.print("   ✅ Template documents (specification.md, architecture.md, pseudocode.md)")
    console.print("   ✅ Project documentation and guides")

    console.print("\n📖 [bold]Next Steps[/bold]")
    console.print("   1. Review README.md for project overview")
    console.print("   2. Read docs/getting-started.md for detailed guidance")
    console.print("   3. Begin specification phase with SPARC Specification Writer")
    console.print("   4. Set up development environment and team access")

    console.print("\n🧠 [bold]Memory Bank Files[/bold]")
    for path in MEMORY_BANK_FILES:
        console.print(f"   - {path} ({_MEMORY_BANK_NOTES[path]})")

    console.print("\n⚙️  [bold]Configuration[/bold]")
    for path in CONFIG_FILES:
        console.print(f"   - {path} ({_CONFIG_NOTES[path]})")

    console.print(
        "\n[yellow]💡 Tip: Start by activating the SPARC Specification Writer mode to begin[/yellow]"
    )
    console.print("[yellow]   requirements gathering and scope definition.[/yellow]")
