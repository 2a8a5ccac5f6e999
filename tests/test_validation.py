"""Tests for sparc_init.validation."""

from __future__ import annotations

from sparc_init.layout import REQUIRED_FILES
from sparc_init.scaffold import ProjectScaffolder
from sparc_init.validation import validate_setup


def test_empty_directory_reports_everything(project_root):
    report = validate_setup(project_root, "demo")
    assert not report.ok
    assert report.missing_files == list(REQUIRED_FILES)
    assert report.missing_dirs == ["memory-bank", "docs", "reports", "project/demo", ".roo"]


def test_scaffolded_project_passes(project_root, project, settings):
    ProjectScaffolder(project_root, project, settings=settings).run()
    report = validate_setup(project_root, project.project_id)
    assert report.ok
    assert report.to_dict()["ok"] is True


def test_wrong_project_id_fails(project_root, project, settings):
    ProjectScaffolder(project_root, project, settings=settings).run()
    report = validate_setup(project_root, "other-project")
    assert report.missing_files == []
    assert report.missing_dirs == ["project/other-project"]


def test_deleted_file_detected(project_root, project, settings):
    ProjectScaffolder(project_root, project, settings=settings).run()
    (project_root / "memory-bank" / "decisionLog.md").unlink()
    report = validate_setup(project_root, project.project_id)
    assert report.missing_files == ["memory-bank/decisionLog.md"]


def test_directory_in_place_of_file(project_root, project, settings):
    ProjectScaffolder(project_root, project, settings=settings).run()
    (project_root / ".rooignore").unlink()
    (project_root / ".rooignore").mkdir()
    assert validate_setup(project_root, project.project_id).missing_files == [".rooignore"]
