"""
Shared pytest fixtures for sparc-init tests.

This module provides:
- Settings/logging isolation between tests
- A deterministic ``ProjectInfo`` (fixed creation timestamp)
- A custom modes file fixture
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog

from sparc_init.logging import clear_context
from sparc_init.project import ProjectInfo
from sparc_init.settings import SparcSettings, reset_settings

FIXED_NOW = datetime(2026, 1, 15, 9, 30, 0, tzinfo=UTC)

MODES_YAML = """\
customModes:
  - slug: sparc-specification-writer
    name: "Specification Writer"
    roleDefinition: Writes specifications.
    groups:
      - read
      - edit
  - slug: sparc-architect
    name: "Architect"
    roleDefinition: Designs systems.
    groups:
      - read
"""


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Drop cached settings, SPARC_* env vars and logging state around each test."""
    import os

    for key in list(os.environ):
        if key.startswith("SPARC_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    clear_context()
    yield
    reset_settings()
    clear_context()
    structlog.reset_defaults()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def project(fixed_now) -> ProjectInfo:
    return ProjectInfo.create("E-commerce Platform", now=fixed_now)


@pytest.fixture
def settings() -> SparcSettings:
    return SparcSettings(_env_file=None)


@pytest.fixture
def modes_file(tmp_path) -> Path:
    path = tmp_path / "custom_modes.yaml"
    path.write_text(MODES_YAML, encoding="utf-8")
    return path


@pytest.fixture
def project_root(tmp_path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root
