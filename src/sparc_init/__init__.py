"""
sparc-init - scaffolding for SPARC methodology projects.

Creates the memory bank (``activeContext.md``, ``decisionLog.md``,
``productContext.md``, ``progress.md``, ``systemPatterns.md``), the
``.roomodes``/``.rooignore``/``.roo`` configuration, and the SPARC phase
documents for a new project, then validates the result.

Usage::

    from pathlib import Path
    from sparc_init import ProjectInfo, ProjectScaffolder

    project = ProjectInfo.create("User Management API", "user-mgmt-api")
    report = ProjectScaffolder(Path("."), project).run()
"""

from sparc_init.errors import SparcError
from sparc_init.project import ProjectInfo, generate_project_id
from sparc_init.scaffold import ProjectScaffolder, ScaffoldReport
from sparc_init.validation import ValidationReport, validate_setup

__version__ = "1.0.0"

__all__ = [
    "ProjectInfo",
    "ProjectScaffolder",
    "ScaffoldReport",
    "SparcError",
    "ValidationReport",
    "generate_project_id",
    "validate_setup",
]
