"""Pydantic schemas for the roster API."""

from roster.api.schemas.common import PagedResponse, PageMeta, ProblemDetail
from roster.api.schemas.entities import (
    CoachBody,
    CoachSchema,
    PlayerBody,
    PlayerSchema,
    TeamBody,
    TeamSchema,
)

__all__ = [
    "PagedResponse",
    "PageMeta",
    "ProblemDetail",
    "CoachBody",
    "CoachSchema",
    "TeamBody",
    "TeamSchema",
    "PlayerBody",
    "PlayerSchema",
]
