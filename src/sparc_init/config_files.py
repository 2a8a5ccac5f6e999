"""Tool configuration files: ``.roomodes``, ``.rooignore`` and ``.roo/``.

A custom modes file (``custom_modes.yaml``) is copied verbatim to
``.roomodes`` once it parses as a mapping with a ``customModes`` list.
Without one, a minimal single-mode definition is rendered instead.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from sparc_init.errors import InvalidModesFileError
from sparc_init.logging import get_logger
from sparc_init.project import ProjectInfo
from sparc_init.render import ROOIGNORE_TEMPLATE, ROOMODES_TEMPLATE, RULES_TEMPLATE, TemplateRenderer

logger = get_logger(__name__)

MCP_CONFIG: dict[str, Any] = {
    "description": "MCP configuration for SPARC methodology project",
    "version": "1.0.0",
    "mcpServers": {
        "research-tools": {
            "name": "Research & Analysis Tools",
            "enabled": True,
            "allowedModes": [
                "enhanced-data-researcher",
                "sparc-domain-intelligence",
            ],
        }
    },
    "securityPolicies": {
        "dataRetention": {"enabled": True, "maxRetentionDays": 30},
        "accessLogging": {"enabled": True, "logLevel": "INFO"},
    },
}


def load_modes_file(path: Path) -> str:
    """Read and check a custom modes file; returns its text unchanged."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidModesFileError(
            f"Modes file {path} is not valid UTF-8",
            context={"path": str(path)},
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidModesFileError(
            f"Modes file {path} is not valid YAML",
            context={"path": str(path)},
            cause=e,
        ) from e

    if not isinstance(data, dict) or not isinstance(data.get("customModes"), list):
        raise InvalidModesFileError(
            f"Modes file {path} must define a 'customModes' list",
            context={"path": str(path)},
        )

    missing_slugs = [i for i, m in enumerate(data["customModes"]) if not isinstance(m, dict) or "slug" not in m]
    if missing_slugs:
        raise InvalidModesFileError(
            f"Modes file {path} has modes without a slug at positions {missing_slugs}",
            context={"path": str(path), "positions": missing_slugs},
        )

    logger.debug("modes_file_loaded", path=str(path), modes=len(data["customModes"]))
    return text


def render_mcp_config() -> str:
    return json.dumps(MCP_CONFIG, indent=2, ensure_ascii=False) + "\n"


def build_configuration_files(
    project: ProjectInfo,
    renderer: TemplateRenderer,
    modes_file: Path | None = None,
) -> tuple[dict[str, str], list[str]]:
    """Render the configuration files.

    Returns:
        ``({relative_path: content}, warnings)``
    """
    warnings: list[str] = []

    if modes_file is not None and modes_file.is_file():
        roomodes = load_modes_file(modes_file)
        logger.info("modes_file_copied", path=str(modes_file))
    else:
        if modes_file is not None:
            warnings.append(f"Modes file {modes_file} not found, created minimal .roomodes")
        else:
            warnings.append("No custom modes file configured, created minimal .roomodes")
        logger.warning("modes_file_missing", path=str(modes_file) if modes_file else None)
        roomodes = renderer.render(ROOMODES_TEMPLATE, project)

    files = {
        ".roomodes": roomodes,
        ".rooignore": renderer.render(ROOIGNORE_TEMPLATE, project),
        ".roo/mcp.json": render_mcp_config(),
        ".roo/rules/project.md": renderer.render(RULES_TEMPLATE, project),
    }
    return files, warnings


__all__ = ["MCP_CONFIG", "build_configuration_files", "load_modes_file", "render_mcp_config"]
