"""
Scaffold orchestration: directories, memory bank, configuration, documents.

Architecture:
    ::

        ProjectScaffolder.run()
          │
          ├─ plan()        render every file in memory, collect warnings
          ├─ conflicts     refuse to overwrite unless force=True
          ├─ directories   create_directory_structure()
          ├─ write         memory bank → config → phase docs → project docs
          └─ validate      validate_setup(); failure raises ScaffoldValidationError

All rendering happens before the first write, so a template or modes-file
error leaves the target directory untouched.

Examples:
    >>> project = ProjectInfo.create("E-commerce Platform")
    >>> report = ProjectScaffolder(Path("."), project).run()
    >>> report.validation.ok
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sparc_init.config_files import build_configuration_files
from sparc_init.errors import ProjectExistsError, ScaffoldValidationError
from sparc_init.layout import create_directory_structure, project_directories
from sparc_init.logging import LogContext, get_logger
from sparc_init.project import ProjectInfo
from sparc_init.render import (
    MEMORY_BANK_TEMPLATES,
    PHASE_TEMPLATES,
    PROJECT_DOC_TEMPLATES,
    TemplateRenderer,
)
from sparc_init.settings import SparcSettings, get_settings
from sparc_init.validation import ValidationReport, validate_setup

logger = get_logger(__name__)


@dataclass
class ScaffoldPlan:
    """Everything a scaffold will create, rendered but not yet written."""

    directories: list[str]
    stages: dict[str, dict[str, str]]
    warnings: list[str] = field(default_factory=list)

    @property
    def files(self) -> dict[str, str]:
        merged: dict[str, str] = {}
        for stage_files in self.stages.values():
            merged.update(stage_files)
        return merged


@dataclass
class ScaffoldReport:
    """Outcome of a scaffold run."""

    project: ProjectInfo
    root: Path
    created_dirs: list[str] = field(default_factory=list)
    written_files: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    validation: ValidationReport | None = None
    dry_run: bool = False

    def to_dict(self) -> dict:
        return {
            "project": self.project.to_dict(),
            "root": str(self.root),
            "dry_run": self.dry_run,
            "created_dirs": self.created_dirs,
            "written_files": self.written_files,
            "warnings": self.warnings,
            "validation_ok": self.validation.ok if self.validation else None,
        }


class ProjectScaffolder:
    """Create a complete SPARC project structure under ``root``."""

    def __init__(
        self,
        root: Path,
        project: ProjectInfo,
        *,
        settings: SparcSettings | None = None,
        renderer: TemplateRenderer | None = None,
        modes_file: Path | None = None,
        force: bool = False,
        dry_run: bool = False,
    ):
        self.root = Path(root)
        self.project = project
        self.settings = settings or get_settings()
        self.renderer = renderer or TemplateRenderer(self.settings.template_dir)
        self.modes_file = modes_file if modes_file is not None else self.settings.custom_modes_file
        self.force = force
        self.dry_run = dry_run

    def plan(self) -> ScaffoldPlan:
        """Render every file without touching the filesystem."""
        config_files, warnings = build_configuration_files(
            self.project, self.renderer, self.modes_file
        )
        stages = {
            "memory_bank": self.renderer.render_all(MEMORY_BANK_TEMPLATES, self.project),
            "configuration": config_files,
            "template_documents": self.renderer.render_all(PHASE_TEMPLATES, self.project),
            "project_documentation": self.renderer.render_all(PROJECT_DOC_TEMPLATES, self.project),
        }
        directories = [str(d) for d in project_directories(self.project.project_id)]
        return ScaffoldPlan(directories=directories, stages=stages, warnings=warnings)

    def find_conflicts(self, plan: ScaffoldPlan) -> list[str]:
        return [rel for rel in plan.files if (self.root / rel).exists()]

    def run(self) -> ScaffoldReport:
        with LogContext(project_id=self.project.project_id):
            logger.info(
                "scaffold_started",
                name=self.project.name,
                root=str(self.root),
                dry_run=self.dry_run,
            )
            plan = self.plan()
            report = ScaffoldReport(
                project=self.project,
                root=self.root,
                warnings=list(plan.warnings),
                dry_run=self.dry_run,
            )

            conflicts = self.find_conflicts(plan)
            if conflicts and not self.force:
                raise ProjectExistsError(conflicts, context={"root": str(self.root)})
            if conflicts:
                logger.warning("overwriting_existing_files", count=len(conflicts))

            if self.dry_run:
                report.created_dirs = [d for d in plan.directories if not (self.root / d).is_dir()]
                report.written_files = list(plan.files)
                logger.info("scaffold_planned", files=len(report.written_files))
                return report

            created = create_directory_structure(self.root, self.project.project_id)
            report.created_dirs = [str(p.relative_to(self.root).as_posix()) for p in created]

            for stage, files in plan.stages.items():
                for rel, content in files.items():
                    self._write(rel, content)
                    report.written_files.append(rel)
                logger.info("stage_completed", stage=stage, files=len(files))

            report.validation = validate_setup(self.root, self.project.project_id)
            if not report.validation.ok:
                raise ScaffoldValidationError(report.validation)

            logger.info(
                "scaffold_completed",
                dirs=len(report.created_dirs),
                files=len(report.written_files),
            )
            return report

    def _write(self, rel: str, content: str) -> None:
        target = self.root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8", newline="\n")
        logger.debug("file_written", path=rel, bytes=len(content.encode("utf-8")))


__all__ = ["ProjectScaffolder", "ScaffoldPlan", "ScaffoldReport"]
