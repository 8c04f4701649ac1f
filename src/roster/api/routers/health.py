"""Health endpoints — K8s-style probes at the root (no API prefix).

Endpoints:
    GET /health         Overall status with a database check
    GET /health/ready   Readiness probe — 503 if the database is down
    GET /health/live    Liveness probe — always 200
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from roster.api.deps import DbSession
from roster.ops.context import OperationContext

_START_TIME = time.monotonic()

router = APIRouter(tags=["health"])


class CheckResult(BaseModel):
    """Result of a single dependency health check."""

    status: Literal["healthy", "unhealthy"]
    latency_ms: float | None = None
    error: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health envelope returned by ``GET /health`` and ``GET /health/ready``."""

    status: Literal["healthy", "unhealthy"] = "healthy"
    service: str = ""
    version: str = ""
    uptime_s: float = Field(default_factory=lambda: round(time.monotonic() - _START_TIME, 1))
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    checks: dict[str, CheckResult] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    status: str = "alive"


def _check(request: Request, session: DbSession) -> HealthResponse:
    from roster.ops.database import check_database_health

    result = check_database_health(OperationContext(session=session, caller="api"))
    if result.success:
        db = CheckResult(
            status="healthy",
            latency_ms=result.data.latency_ms,
            details={"backend": result.data.backend},
        )
    else:
        db = CheckResult(status="unhealthy", error=result.error.message[:200])

    settings = request.app.state.settings
    return HealthResponse(
        status=db.status,
        service=settings.api_title,
        version=settings.api_version,
        checks={"database": db},
    )


@router.get("/health", response_model=HealthResponse)
def health(request: Request, session: DbSession) -> JSONResponse:
    """Primary health — runs the database check."""
    body = _check(request, session)
    code = 503 if body.status == "unhealthy" else 200
    return JSONResponse(content=body.model_dump(), status_code=code)


@router.get("/health/ready", response_model=HealthResponse)
def readiness(request: Request, session: DbSession) -> JSONResponse:
    """Readiness probe — 503 unless the database answers."""
    body = _check(request, session)
    code = 503 if body.status != "healthy" else 200
    return JSONResponse(content=body.model_dump(), status_code=code)


@router.get("/health/live", response_model=LivenessResponse)
def liveness() -> LivenessResponse:
    """Liveness probe — always 200 if the process is running."""
    return LivenessResponse()
