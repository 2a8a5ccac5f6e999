"""
Structured error types for sparc-init.

Every failure the scaffolder can hit is a ``SparcError`` subclass that carries
a category (for mapping to operation error codes), a context dict (paths,
names, offending values), and an optional chained cause.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                       SparcError                          │
        │              (category, context, cause)                   │
        ├──────────────────────────────────────────────────────────┤
        │  ValidationError          ConfigError                     │
        │    InvalidProjectName       InvalidModesFile              │
        │    InvalidProjectId                                       │
        │                                                           │
        │  TemplateError            StorageError                    │
        │    TemplateNotFound         ProjectExists                 │
        │    TemplateRender           ScaffoldValidation            │
        └──────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Raise bare ``Exception`` from library code
    ✅ DO: Raise the narrowest ``SparcError`` subclass

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as ``cause=`` for error chaining

Examples:
    >>> err = InvalidProjectNameError("Project name is required")
    >>> err.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> err.with_context(name="").context
    {'name': ''}
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for routing and operation error codes."""

    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    TEMPLATE = "TEMPLATE"
    STORAGE = "STORAGE"
    INTERNAL = "INTERNAL"


class SparcError(Exception):
    """Base class for all sparc-init errors.

    Attributes:
        message: Human-readable description.
        category: ``ErrorCategory`` for classification.
        context: Extra key/value metadata (paths, offending values).
        cause: Underlying exception, if any.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SparcError:
        """Add context fields and return self for chaining."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialise for structured logging or JSON output."""
        d: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            d["context"] = dict(self.context)
        if self.cause is not None:
            d["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return d

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# ── Validation ───────────────────────────────────────────────────────────


class ValidationError(SparcError):
    """Invalid user input."""

    default_category = ErrorCategory.VALIDATION


class InvalidProjectNameError(ValidationError):
    """Project name is empty or yields no usable id."""


class InvalidProjectIdError(ValidationError):
    """Explicit project id cannot be used as a directory name."""


# ── Configuration ────────────────────────────────────────────────────────


class ConfigError(SparcError):
    """Configuration problems (settings, modes file)."""

    default_category = ErrorCategory.CONFIG


class InvalidModesFileError(ConfigError):
    """Custom modes file is not valid YAML or lacks a ``customModes`` list."""


# ── Templates ────────────────────────────────────────────────────────────


class TemplateError(SparcError):
    """Template loading or rendering failure."""

    default_category = ErrorCategory.TEMPLATE


class TemplateNotFoundError(TemplateError):
    """Requested template does not exist in the template directory."""


class TemplateRenderError(TemplateError):
    """Template references an undefined variable or fails to render."""


# ── Storage ──────────────────────────────────────────────────────────────


class StorageError(SparcError):
    """Filesystem state prevents scaffolding."""

    default_category = ErrorCategory.STORAGE


class ProjectExistsError(StorageError):
    """Target files already exist and overwriting was not requested."""

    def __init__(self, conflicts: list[str], **kwargs: Any) -> None:
        preview = ", ".join(conflicts[:5])
        if len(conflicts) > 5:
            preview += f", ... ({len(conflicts) - 5} more)"
        super().__init__(
            f"{len(conflicts)} file(s) already exist: {preview}. Use --force to overwrite.",
            **kwargs,
        )
        self.conflicts = list(conflicts)
        self.context.setdefault("conflicts", self.conflicts)


class ScaffoldValidationError(StorageError):
    """Post-write validation found missing files or directories."""

    def __init__(self, report: Any, **kwargs: Any) -> None:
        super().__init__("Project setup validation failed", **kwargs)
        self.report = report
        self.context.setdefault("missing_files", list(report.missing_files))
        self.context.setdefault("missing_dirs", list(report.missing_dirs))


__all__ = [
    "ErrorCategory",
    "SparcError",
    "ValidationError",
    "InvalidProjectNameError",
    "InvalidProjectIdError",
    "ConfigError",
    "InvalidModesFileError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "StorageError",
    "ProjectExistsError",
    "ScaffoldValidationError",
]
