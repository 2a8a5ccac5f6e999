"""
Jinja2 rendering of the generated project documents.

Each output file of the scaffold has one template under ``templates/``.
``DOCUMENT_TEMPLATES`` maps the output path (relative to the project root)
to its template, grouped by the scaffold stage that writes it.

Architecture:
    ::

        ProjectInfo ──► TemplateRenderer.context()
                              │
                              ▼
                  Jinja2 Environment (StrictUndefined)
                              │
                              ▼
                   rendered Markdown / YAML / ignore file
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from sparc_init.errors import TemplateNotFoundError, TemplateRenderError
from sparc_init.project import ProjectInfo

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

MEMORY_BANK_TEMPLATES = {
    "memory-bank/activeContext.md": "memory-bank/activeContext.md.j2",
    "memory-bank/decisionLog.md": "memory-bank/decisionLog.md.j2",
    "memory-bank/productContext.md": "memory-bank/productContext.md.j2",
    "memory-bank/progress.md": "memory-bank/progress.md.j2",
    "memory-bank/systemPatterns.md": "memory-bank/systemPatterns.md.j2",
}

PHASE_TEMPLATES = {
    "specification.md": "docs/specification.md.j2",
    "architecture.md": "docs/architecture.md.j2",
    "pseudocode.md": "docs/pseudocode.md.j2",
}

PROJECT_DOC_TEMPLATES = {
    "README.md": "docs/README.md.j2",
    "docs/getting-started.md": "docs/getting-started.md.j2",
}

ROOMODES_TEMPLATE = "roo/roomodes.yaml.j2"
ROOIGNORE_TEMPLATE = "roo/rooignore.j2"
RULES_TEMPLATE = "roo/rules-project.md.j2"


class TemplateRenderer:
    """Render scaffold templates for one project.

    Templates are plain Jinja2 with ``StrictUndefined``: a typo in a variable
    name fails loudly instead of leaving an empty field in a generated file.
    """

    def __init__(self, template_dir: Path | None = None):
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    @staticmethod
    def context(project: ProjectInfo) -> dict[str, Any]:
        return {
            "project": project,
            "date": project.date,
            "timestamp": project.timestamp,
            "review_date": project.review_date,
            "template_version": project.template_version,
        }

    def render(self, template_name: str, project: ProjectInfo) -> str:
        """Render ``template_name`` with the project's context."""
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                f"Template not found: {template_name}",
                context={"template": template_name, "template_dir": str(self.template_dir)},
                cause=e,
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateRenderError(
                f"Syntax error in template {template_name} line {e.lineno}: {e.message}",
                context={"template": template_name},
                cause=e,
            ) from e

        try:
            return template.render(**self.context(project))
        except UndefinedError as e:
            raise TemplateRenderError(
                f"Failed to render {template_name}: {e.message}",
                context={"template": template_name},
                cause=e,
            ) from e

    def render_all(self, templates: dict[str, str], project: ProjectInfo) -> dict[str, str]:
        """Render a ``{output_path: template_name}`` mapping."""
        return {out: self.render(name, project) for out, name in templates.items()}


__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "MEMORY_BANK_TEMPLATES",
    "PHASE_TEMPLATES",
    "PROJECT_DOC_TEMPLATES",
    "ROOIGNORE_TEMPLATE",
    "ROOMODES_TEMPLATE",
    "RULES_TEMPLATE",
    "TemplateRenderer",
]
