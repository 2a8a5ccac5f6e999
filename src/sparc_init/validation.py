"""Post-scaffold verification of required files and directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sparc_init.layout import REQUIRED_FILES, required_directories
from sparc_init.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ValidationReport:
    """Missing paths found under a project root."""

    root: str
    project_id: str
    missing_files: list[str] = field(default_factory=list)
    missing_dirs: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_files and not self.missing_dirs

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "project_id": self.project_id,
            "ok": self.ok,
            "missing_files": self.missing_files,
            "missing_dirs": self.missing_dirs,
        }


def validate_setup(root: Path, project_id: str) -> ValidationReport:
    """Check that every required file and directory exists under ``root``."""
    report = ValidationReport(root=str(root), project_id=project_id)

    for rel in REQUIRED_FILES:
        if not (root / rel).is_file():
            report.missing_files.append(rel)

    for rel_dir in required_directories(project_id):
        if not (root / rel_dir).is_dir():
            report.missing_dirs.append(str(rel_dir))

    if report.ok:
        logger.info("setup_validation_passed", root=str(root))
    else:
        logger.error(
            "setup_validation_failed",
            root=str(root),
            missing_files=report.missing_files,
            missing_dirs=report.missing_dirs,
        )
    return report


__all__ = ["ValidationReport", "validate_setup"]
