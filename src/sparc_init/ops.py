"""
Operations layer: the functions the CLI calls.

Each operation takes a plain request, runs the library code, and converts
``SparcError``/``OSError`` into an :class:`OperationResult` failure with a
machine-readable code. Nothing here prints or exits.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from sparc_init.errors import (
    ConfigError,
    ErrorCategory,
    ProjectExistsError,
    ScaffoldValidationError,
    SparcError,
    TemplateError,
    ValidationError,
)
from sparc_init.logging import get_logger
from sparc_init.project import ProjectInfo, validate_project_id
from sparc_init.result import OperationResult
from sparc_init.scaffold import ProjectScaffolder, ScaffoldReport
from sparc_init.settings import SparcSettings, get_settings
from sparc_init.validation import ValidationReport, validate_setup

logger = get_logger(__name__)


@dataclass(frozen=True)
class InitProjectRequest:
    """Input for :func:`init_project`."""

    name: str
    project_id: str | None = None
    directory: Path = Path(".")
    modes_file: Path | None = None
    force: bool = False
    dry_run: bool = False


def _error_code(error: SparcError) -> str:
    if isinstance(error, ProjectExistsError):
        return "ALREADY_EXISTS"
    if isinstance(error, ScaffoldValidationError):
        return "SETUP_INVALID"
    if isinstance(error, ValidationError):
        return "VALIDATION_FAILED"
    if isinstance(error, ConfigError):
        return "CONFIG_INVALID"
    if isinstance(error, TemplateError):
        return "TEMPLATE_ERROR"
    return "INTERNAL"


def _elapsed(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def init_project(
    request: InitProjectRequest,
    settings: SparcSettings | None = None,
) -> OperationResult[ScaffoldReport]:
    """Scaffold a SPARC project as described by ``request``."""
    start = time.perf_counter()
    settings = settings or get_settings()

    try:
        project = ProjectInfo.create(
            request.name,
            request.project_id,
            template_version=settings.template_version,
        )
        scaffolder = ProjectScaffolder(
            request.directory,
            project,
            settings=settings,
            modes_file=request.modes_file,
            force=request.force,
            dry_run=request.dry_run,
        )
        report = scaffolder.run()
    except SparcError as e:
        logger.info("init_project_failed", **e.to_dict())
        return OperationResult.fail(
            _error_code(e),
            e.message,
            category=e.category,
            details=e.context,
            elapsed_ms=_elapsed(start),
        )
    except OSError as e:
        logger.error("init_project_io_error", error=str(e))
        return OperationResult.fail(
            "IO_ERROR",
            str(e),
            category=ErrorCategory.STORAGE,
            details={"path": str(e.filename)} if e.filename else {},
            elapsed_ms=_elapsed(start),
        )

    return OperationResult.ok(report, warnings=report.warnings, elapsed_ms=_elapsed(start))


def validate_project(directory: Path, project_id: str) -> OperationResult[ValidationReport]:
    """Check an existing project directory for required files and directories."""
    start = time.perf_counter()
    project_id = project_id.strip()
    try:
        validate_project_id(project_id)
    except ValidationError as e:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            e.message,
            category=e.category,
            details=e.context,
            elapsed_ms=_elapsed(start),
        )

    report = validate_setup(Path(directory), project_id)
    if not report.ok:
        return OperationResult.fail(
            "SETUP_INVALID",
            "Project setup validation failed",
            category=ErrorCategory.STORAGE,
            details={
                "missing_files": report.missing_files,
                "missing_dirs": report.missing_dirs,
            },
            elapsed_ms=_elapsed(start),
        )
    return OperationResult.ok(report, elapsed_ms=_elapsed(start))


__all__ = ["InitProjectRequest", "init_project", "validate_project"]
