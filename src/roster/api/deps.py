"""
FastAPI dependency injection — shared singletons and per-request factories.

Usage in routers::

    from roster.api.deps import OpContext

    @router.get("/coaches/{coach_id}")
    def get_coach(ctx: OpContext, coach_id: int):
        ...
"""

from __future__ import annotations

import uuid
from collections.abc import Generator
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from roster.api.settings import RosterAPISettings
from roster.core.orm.session import roster_session_factory
from roster.ops.context import OperationContext

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> RosterAPISettings:
    """Cached settings — loaded once per process."""
    return RosterAPISettings()


# ── Database session (per-request) ───────────────────────────────────────


def get_session(request: Request) -> Generator[Session, None, None]:
    """Yield a session bound to the app's engine for the request lifespan."""
    factory = roster_session_factory(request.app.state.engine)
    with factory() as session:
        yield session


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(
        session=session,
        request_id=request_id,
        caller="api",
    )


# ── Pagination parameters (per-request) ─────────────────────────────────


@dataclass(frozen=True, slots=True)
class PaginationParams:
    """Pagination parameters for list endpoints."""

    limit: int = 50
    offset: int = 0


def get_pagination(
    limit: int = Query(50, ge=1, le=500, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
) -> PaginationParams:
    return PaginationParams(limit=limit, offset=offset)


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[RosterAPISettings, Depends(get_settings)]
DbSession = Annotated[Session, Depends(get_session)]
OpContext = Annotated[OperationContext, Depends(get_operation_context)]
Pagination = Annotated[PaginationParams, Depends(get_pagination)]
