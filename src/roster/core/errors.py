"""
Structured error types for roster.

Every error raised by the repository and operations layers extends
:class:`RosterError` so callers can classify failures by
:class:`ErrorCategory` and attach structured context for logging.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                     RosterError                       │
        │            (category, context, cause)                 │
        ├──────────────────────────────────────────────────────┤
        │  EntityNotFoundError   ValidationError   ConflictError│
        │  (NOT_FOUND, entity)   (VALIDATION)      (CONFLICT)   │
        │                                                       │
        │  DatabaseError                                        │
        │  (DATABASE)                                           │
        └──────────────────────────────────────────────────────┘

Usage:
    from roster.core.errors import EntityNotFoundError

    if not repo.exists(coach_id):
        raise EntityNotFoundError("Don't know coach", entity=payload)

Tags:
    error-handling, exception-hierarchy, roster, core

Doc-Types:
    api-reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    CONFLICT = "CONFLICT"
    DATABASE = "DATABASE"
    INTERNAL = "INTERNAL"


class RosterError(Exception):
    """Base exception for all roster errors.

    Subclasses set ``default_category`` to provide a sensible default for
    their domain.  ``code`` is the machine-readable code used by the ops
    layer and mapped to an HTTP status at the API boundary.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    code: str = "INTERNAL"

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RosterError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = self.context
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class EntityNotFoundError(RosterError):
    """An entity referenced by identifier is not known.

    Carries the rejected ``entity`` payload (for updates of unknown
    entities) so the caller can echo it back.
    """

    default_category = ErrorCategory.NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, message: str, *, entity: Any = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.entity = entity

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.entity is not None:
            result["entity"] = self.entity
        return result


class ValidationError(RosterError):
    """Input failed a domain rule (e.g. dangling reference)."""

    default_category = ErrorCategory.VALIDATION
    code = "VALIDATION_FAILED"


class ConflictError(RosterError):
    """Operation conflicts with current state (e.g. coach already bound)."""

    default_category = ErrorCategory.CONFLICT
    code = "CONFLICT"


class DatabaseError(RosterError):
    """Persistence layer failure."""

    default_category = ErrorCategory.DATABASE
    code = "INTERNAL"


__all__ = [
    "ErrorCategory",
    "RosterError",
    "EntityNotFoundError",
    "ValidationError",
    "ConflictError",
    "DatabaseError",
]
