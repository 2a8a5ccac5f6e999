"""Directory structure and required-file catalogue of a SPARC project.

The structure is grouped the same way the project tree is documented in
``memory-bank/systemPatterns.md``: root areas, ``.roo`` configuration, the
per-project work area under ``project/<id>/``, documentation, development,
infrastructure, reporting, design, data/ML and compliance directories.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from sparc_init.logging import get_logger

logger = get_logger(__name__)

ROOT_DIRS = ("docs", "reports", "memory-bank", "infrastructure", "scripts", "tests")

ROO_DIRS = (".roo/rules", ".roo/commands")

PROJECT_AREA_DIRS = (
    "control/conclave",
    "control/planning",
    "control/orchestration",
    "sections",
    "synthesis",
    "evidence/research",
    "evidence/security",
    "evidence/domain",
    "evidence/technology",
    "evidence/requirements",
    "evidence/operations",
    "evidence/adversarial",
    "adversarial",
    "risk-assessment",
    "business-intelligence",
    "security-intelligence",
    "architecture-intelligence",
    "operations-intelligence",
    "requirements-intelligence",
    "validation",
    "quality-assurance",
    "debug",
    "logs",
    "integration",
    "monitoring",
    "observability",
    "alerts",
    "dashboards",
    "incidents",
    "optimization",
    "performance",
    "analysis",
)

DOCS_DIRS = (
    "architecture",
    "security",
    "requirements",
    "ux",
    "personas",
    "research",
    "specification",
    "pseudocode",
    "algorithms",
    "qa",
    "quality",
    "testing",
    "ui",
    "design-system",
    "api",
    "api-docs",
    "openapi",
    "ml",
    "models",
    "ml-ops",
    "mobile",
    "platform",
    "runbooks",
    "sre",
    "operations",
    "policies",
    "audits",
    "project",
    "pm",
    "planning",
    "reports",
    "businessIntelligence",
    "technicalArchitecture",
    "securityFramework",
    "operationalProcedures",
    "qualityAssurance",
)

DEVELOPMENT_DIRS = ("apps", "packages", "services", "libs", "src", "tests", "scripts", "ops-scripts")

INFRASTRUCTURE_DIRS = (
    "infrastructure",
    "infra",
    "deploy",
    "environments",
    "platform",
    "k8s",
    "charts",
    "ci-cd",
    "monitoring",
    "observability",
    "logging",
    "alerts",
    "operations",
    "runbooks",
)

REPORT_DIRS = (
    "adversarial",
    "risk",
    "optimization",
    "monitoring",
    "incidents",
    "orchestration",
    "qa",
    "quality",
    "testing",
    "security",
    "audits",
    "performance",
    "integration",
    "delivery",
)

DESIGN_DIRS = ("design-system", "tokens", "ui", "components", ".storybook", "stories")

DATA_DIRS = (
    "ml",
    "models",
    "pipelines",
    "experiments",
    "data",
    "warehouse",
    "analytics",
    "db",
    "database",
    "schemas",
)

COMPLIANCE_DIRS = ("security", "development", "testing", "integration", "compliance")

MEMORY_BANK_DIR = "memory-bank"

MEMORY_BANK_FILES = (
    "memory-bank/activeContext.md",
    "memory-bank/decisionLog.md",
    "memory-bank/productContext.md",
    "memory-bank/progress.md",
    "memory-bank/systemPatterns.md",
)

CONFIG_FILES = (".roomodes", ".rooignore", ".roo/mcp.json", ".roo/rules/project.md")

PHASE_DOCUMENTS = ("specification.md", "architecture.md", "pseudocode.md")

PROJECT_DOCUMENTS = ("README.md", "docs/getting-started.md")

REQUIRED_FILES = (
    ".roomodes",
    ".rooignore",
    ".roo/mcp.json",
    *MEMORY_BANK_FILES,
    *PHASE_DOCUMENTS,
    *PROJECT_DOCUMENTS,
)


def project_area(project_id: str) -> PurePosixPath:
    return PurePosixPath("project") / project_id


def project_directories(project_id: str) -> list[PurePosixPath]:
    """Every directory of the scaffold, relative to the project root.

    Order follows the grouping above; duplicates (``tests``, ``monitoring``,
    ``security`` ...) are kept only at their first occurrence.
    """
    area = project_area(project_id)
    groups: list[list[PurePosixPath]] = [
        [PurePosixPath(d) for d in ROOT_DIRS],
        [PurePosixPath(d) for d in ROO_DIRS],
        [PurePosixPath(MEMORY_BANK_DIR)],
        [area / d for d in PROJECT_AREA_DIRS],
        [PurePosixPath("docs") / d for d in DOCS_DIRS],
        [PurePosixPath(d) for d in DEVELOPMENT_DIRS],
        [PurePosixPath(d) for d in INFRASTRUCTURE_DIRS],
        [PurePosixPath("reports") / d for d in REPORT_DIRS],
        [PurePosixPath(d) for d in DESIGN_DIRS],
        [PurePosixPath(d) for d in DATA_DIRS],
        [PurePosixPath(d) for d in COMPLIANCE_DIRS],
    ]

    seen: set[PurePosixPath] = set()
    ordered: list[PurePosixPath] = []
    for group in groups:
        for rel in group:
            if rel not in seen:
                seen.add(rel)
                ordered.append(rel)
    return ordered


def required_directories(project_id: str) -> list[PurePosixPath]:
    """Directories whose absence fails setup validation."""
    return [
        PurePosixPath(MEMORY_BANK_DIR),
        PurePosixPath("docs"),
        PurePosixPath("reports"),
        project_area(project_id),
        PurePosixPath(".roo"),
    ]


def create_directory_structure(root: Path, project_id: str) -> list[Path]:
    """Create every scaffold directory under ``root``.

    Returns:
        The directories that did not exist before the call.
    """
    created: list[Path] = []
    for rel in project_directories(project_id):
        target = root / rel
        if not target.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            created.append(target)
    logger.debug("directory_structure_created", root=str(root), created=len(created))
    return created


__all__ = [
    "CONFIG_FILES",
    "MEMORY_BANK_FILES",
    "PHASE_DOCUMENTS",
    "PROJECT_DOCUMENTS",
    "REQUIRED_FILES",
    "create_directory_structure",
    "project_area",
    "project_directories",
    "required_directories",
]
