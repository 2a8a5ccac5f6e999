"""
CLI layer for sparc-init.

Provides a Typer application whose commands delegate to the operations layer
(``sparc_init.ops``). All scaffolding logic lives in the library; this package
handles argument parsing, coloured output and the completion summary.

Entry point::

    sparc-init --help
"""

from sparc_init.cli.app import app

__all__ = ["app"]
