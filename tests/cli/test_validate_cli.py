"""Tests for sparc_init.cli — ``validate`` command."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from sparc_init.cli import app

runner = CliRunner()


def _scaffold(root):
    result = runner.invoke(app, ["init", "--name", "Demo", "-d", str(root)])
    assert result.exit_code == 0, result.output


def test_valid_project(project_root):
    _scaffold(project_root)
    result = runner.invoke(app, ["validate", "--id", "demo", "-d", str(project_root)])
    assert result.exit_code == 0
    assert "validation passed" in result.output


def test_empty_directory(project_root):
    result = runner.invoke(app, ["validate", "-i", "demo", "-d", str(project_root)])
    assert result.exit_code == 1
    assert "SETUP_INVALID" in result.output
    assert "memory-bank/activeContext.md" in result.output
    assert "project/demo" in result.output


def test_missing_single_file(project_root):
    _scaffold(project_root)
    (project_root / "pseudocode.md").unlink()
    result = runner.invoke(app, ["validate", "-i", "demo", "-d", str(project_root)])
    assert result.exit_code == 1
    assert "pseudocode.md" in result.output


def test_id_required(project_root):
    result = runner.invoke(app, ["validate", "-d", str(project_root)])
    assert result.exit_code == 2


def test_json_output(project_root):
    _scaffold(project_root)
    result = runner.invoke(app, ["validate", "-i", "demo", "-d", str(project_root), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["data"]["ok"] is True
