"""Tests for sparc_init.ops — operation envelopes and error codes."""

from __future__ import annotations

from unittest.mock import patch

from sparc_init.errors import ErrorCategory
from sparc_init.ops import InitProjectRequest, init_project, validate_project
from sparc_init.result import OperationResult


class TestInitProject:
    def test_success(self, project_root, settings):
        result = init_project(
            InitProjectRequest(name="User Management API", project_id="user-mgmt-api", directory=project_root),
            settings,
        )
        assert result.success
        assert result.data.project.project_id == "user-mgmt-api"
        assert result.data.validation.ok
        assert result.warnings == result.data.warnings
        assert result.elapsed_ms >= 0

    def test_template_version_from_settings(self, project_root):
        from sparc_init.settings import SparcSettings

        settings = SparcSettings(_env_file=None, template_version="2.0.0")
        result = init_project(InitProjectRequest(name="Demo", directory=project_root), settings)
        assert result.data.project.template_version == "2.0.0"
        assert "SPARC Version**: 2.0.0" in (project_root / "README.md").read_text(encoding="utf-8")

    def test_empty_name(self, project_root, settings):
        result = init_project(InitProjectRequest(name="", directory=project_root), settings)
        assert not result.success
        assert result.error.code == "VALIDATION_FAILED"
        assert result.error.category == ErrorCategory.VALIDATION

    def test_existing_project(self, project_root, settings):
        request = InitProjectRequest(name="Demo", directory=project_root)
        assert init_project(request, settings).success
        result = init_project(request, settings)
        assert result.error.code == "ALREADY_EXISTS"
        assert "conflicts" in result.error.details

    def test_force(self, project_root, settings):
        assert init_project(InitProjectRequest(name="Demo", directory=project_root), settings).success
        result = init_project(
            InitProjectRequest(name="Demo", directory=project_root, force=True), settings
        )
        assert result.success

    def test_invalid_modes_file(self, project_root, settings, tmp_path):
        bad = tmp_path / "modes.yaml"
        bad.write_text("customModes: 3\n")
        result = init_project(
            InitProjectRequest(name="Demo", directory=project_root, modes_file=bad), settings
        )
        assert result.error.code == "CONFIG_INVALID"

    def test_modes_file_not_utf8(self, project_root, settings, tmp_path):
        bad = tmp_path / "modes.yaml"
        bad.write_bytes(b"customModes:\n  - slug: caf\xe9\n")
        result = init_project(
            InitProjectRequest(name="Demo", directory=project_root, modes_file=bad), settings
        )
        assert result.error.code == "CONFIG_INVALID"
        assert result.error.details["path"] == str(bad)
        assert list(project_root.iterdir()) == []

    def test_nul_in_project_id(self, project_root, settings):
        result = init_project(
            InitProjectRequest(name="Demo", project_id="a\x00b", directory=project_root), settings
        )
        assert result.error.code == "VALIDATION_FAILED"
        assert list(project_root.iterdir()) == []

    def test_expected_failure_not_logged_at_default_level(self, project_root, settings, capsys):
        from sparc_init.logging import configure_logging

        configure_logging(level="WARNING")
        request = InitProjectRequest(name="Demo", directory=project_root)
        assert init_project(request, settings).success
        capsys.readouterr()
        assert init_project(request, settings).error.code == "ALREADY_EXISTS"
        assert "init_project_failed" not in capsys.readouterr().err

    def test_os_error(self, project_root, settings):
        with patch(
            "sparc_init.ops.ProjectScaffolder.run",
            side_effect=PermissionError(13, "Permission denied", str(project_root)),
        ):
            result = init_project(InitProjectRequest(name="Demo", directory=project_root), settings)
        assert result.error.code == "IO_ERROR"
        assert result.error.details["path"] == str(project_root)

    def test_dry_run(self, project_root, settings):
        result = init_project(
            InitProjectRequest(name="Demo", directory=project_root, dry_run=True), settings
        )
        assert result.success
        assert result.data.dry_run
        assert list(project_root.iterdir()) == []


class TestValidateProject:
    def test_missing_everything(self, project_root):
        result = validate_project(project_root, "demo")
        assert result.error.code == "SETUP_INVALID"
        assert "memory-bank/activeContext.md" in result.error.details["missing_files"]

    def test_bad_id(self, project_root):
        result = validate_project(project_root, "a/b")
        assert result.error.code == "VALIDATION_FAILED"

    def test_valid_project(self, project_root, settings):
        init_project(InitProjectRequest(name="Demo", directory=project_root), settings)
        result = validate_project(project_root, "demo")
        assert result.success
        assert result.data.ok

    def test_id_stripped_like_init(self, project_root, settings):
        init_project(
            InitProjectRequest(name="Demo", project_id=" demo ", directory=project_root), settings
        )
        result = validate_project(project_root, " demo ")
        assert result.success
        assert result.data.project_id == "demo"


class TestOperationResult:
    def test_to_dict_success(self):
        result = OperationResult.ok({"a": 1}, warnings=["w"])
        d = result.to_dict()
        assert d["success"] is True
        assert d["data"] == {"a": 1}
        assert d["warnings"] == ["w"]

    def test_to_dict_failure(self):
        result = OperationResult.fail(
            "SETUP_INVALID", "bad", category=ErrorCategory.STORAGE, details={"x": 1}
        )
        d = result.to_dict()
        assert d["success"] is False
        assert d["error"] == {
            "code": "SETUP_INVALID",
            "message": "bad",
            "category": "STORAGE",
            "details": {"x": 1},
        }
