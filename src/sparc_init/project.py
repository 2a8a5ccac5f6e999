"""Project identity: name, id, template version and creation timestamps.

Every generated document is stamped from one ``ProjectInfo`` so that all
files of a scaffold agree on the same dates.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from sparc_init.errors import InvalidProjectIdError, InvalidProjectNameError
from sparc_init.logging import get_logger
from sparc_init.settings import TEMPLATE_VERSION

logger = get_logger(__name__)

_NON_ID_CHARS = re.compile(r"[^a-z0-9]")
_DASH_RUNS = re.compile(r"-+")

REVIEW_INTERVAL_MONTHS = 3


def generate_project_id(name: str) -> str:
    """Derive a filesystem-safe id from a project name.

    >>> generate_project_id("E-commerce Platform")
    'e-commerce-platform'
    >>> generate_project_id("  User Management API!! ")
    'user-management-api'
    """
    slug = _NON_ID_CHARS.sub("-", name.lower())
    slug = _DASH_RUNS.sub("-", slug).strip("-")
    if not slug:
        raise InvalidProjectNameError(
            f"Cannot derive a project id from name {name!r}",
            context={"name": name},
        )
    return slug


def validate_project_id(project_id: str) -> str:
    """Check that an explicit id is usable as the ``project/<id>`` directory."""
    if not project_id or not project_id.strip():
        raise InvalidProjectIdError("Project id must not be empty")
    if "/" in project_id or "\\" in project_id:
        raise InvalidProjectIdError(
            f"Project id {project_id!r} must not contain path separators",
            context={"project_id": project_id},
        )
    if "\x00" in project_id:
        raise InvalidProjectIdError(
            f"Project id {project_id!r} must not contain NUL bytes",
            context={"project_id": project_id},
        )
    if project_id in (".", ".."):
        raise InvalidProjectIdError(
            f"Project id {project_id!r} is not a valid directory name",
            context={"project_id": project_id},
        )
    return project_id


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the end of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


@dataclass(frozen=True)
class ProjectInfo:
    """Identity of the project being scaffolded."""

    name: str
    project_id: str
    template_version: str = TEMPLATE_VERSION
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        name: str,
        project_id: str | None = None,
        *,
        template_version: str = TEMPLATE_VERSION,
        now: datetime | None = None,
    ) -> ProjectInfo:
        """Build a ``ProjectInfo``, generating the id when none is given."""
        name = (name or "").strip()
        if not name:
            raise InvalidProjectNameError("Project name is required")

        if project_id:
            pid = validate_project_id(project_id.strip())
        else:
            pid = generate_project_id(name)
            logger.info("project_id_generated", project_id=pid)

        created = now or datetime.now(UTC)
        if created.tzinfo is None:
            created = created.replace(tzinfo=UTC)
        return cls(
            name=name,
            project_id=pid,
            template_version=template_version,
            created_at=created.astimezone(UTC),
        )

    @property
    def date(self) -> str:
        return self.created_at.strftime("%Y-%m-%d")

    @property
    def timestamp(self) -> str:
        return self.created_at.strftime("%Y-%m-%d %H:%M:%S UTC")

    @property
    def review_date(self) -> str:
        """Quarterly review date recorded in the decision log."""
        return add_months(self.created_at.date(), REVIEW_INTERVAL_MONTHS).isoformat()

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "project_id": self.project_id,
            "template_version": self.template_version,
            "created_at": self.timestamp,
        }


__all__ = [
    "ProjectInfo",
    "add_months",
    "generate_project_id",
    "validate_project_id",
]
