"""
Common API schemas — shared envelopes and RFC 7807 errors.

Entity endpoints return the entity itself (200/201) or a
:class:`ProblemDetail` (4xx/5xx).  List endpoints return
:class:`PagedResponse`.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


# ── RFC 7807 Problem Detail ─────────────────────────────────────────────


class ProblemDetail(BaseModel):
    """RFC 7807 «Problem Details for HTTP APIs».

    Error Codes:
        - ``NOT_FOUND`` (404): Entity does not exist
        - ``VALIDATION_FAILED`` (400): Dangling reference or bad input
        - ``CONFLICT`` (409): Identifier taken or coach already bound
        - ``INTERNAL`` (500): Unexpected server error

    ``details`` carries extra context, e.g. the rejected ``entity`` of an
    update against an unknown identifier.

    Example:
        {
            "type": "about:blank",
            "title": "Don't know coach",
            "status": 404,
            "detail": "",
            "instance": "http://localhost/api/v1/coaches/42",
            "details": {"entity": {"id": 42, "first_name": "Jupp", "last_name": null}}
        }
    """

    type: str = Field(default="about:blank", description="Error type URI")
    title: str = Field(description="Short human-readable error summary")
    status: int = Field(description="HTTP status code")
    detail: str = Field(default="", description="Human-readable explanation of the error")
    instance: str = Field(default="", description="URI of the failing request")
    details: dict[str, Any] = Field(default_factory=dict, description="Extra context")


# ── Success Envelopes ────────────────────────────────────────────────────


class PageMeta(BaseModel):
    """Pagination metadata for list responses."""

    total: int = Field(description="Total items across all pages")
    limit: int = Field(description="Items per page (requested)")
    offset: int = Field(description="Current offset (0-based)")
    has_more: bool = Field(description="True if more pages exist after current")

    @classmethod
    def from_result(cls, total: int, limit: int, offset: int) -> PageMeta:
        return cls(total=total, limit=limit, offset=offset, has_more=(offset + limit) < total)


class PagedResponse(BaseModel, Generic[T]):
    """Paged success envelope for list responses."""

    data: list[T] = Field(description="List of items for this page")
    page: PageMeta = Field(description="Pagination metadata")
    elapsed_ms: float = Field(default=0.0, description="Server-side processing time in milliseconds")
