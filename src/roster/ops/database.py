"""
Database operations.

Thin wrappers around :func:`roster.core.orm.init_schema` for table
creation and connectivity checks.
"""

from __future__ import annotations

import time

from sqlalchemy import text

from roster.core.logging import get_logger
from roster.core.orm.base import RosterBase
from roster.core.orm.session import init_schema
from roster.ops.context import OperationContext
from roster.ops.responses import DatabaseHealth, DatabaseInitResult
from roster.ops.result import OperationResult, start_timer

logger = get_logger(__name__)


def initialize_database(ctx: OperationContext) -> OperationResult[DatabaseInitResult]:
    """Create all roster tables (idempotent)."""
    timer = start_timer()

    if ctx.dry_run:
        from roster.core.orm import tables  # noqa: F401

        return OperationResult.ok(
            DatabaseInitResult(tables=sorted(RosterBase.metadata.tables), dry_run=True),
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        names = init_schema(ctx.session.get_bind())
        logger.info("database_initialized", tables=names)
        return OperationResult.ok(DatabaseInitResult(tables=names), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="initialize_database", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to create tables: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def check_database_health(ctx: OperationContext) -> OperationResult[DatabaseHealth]:
    """Run ``SELECT 1`` and report latency."""
    timer = start_timer()
    backend = ctx.session.get_bind().dialect.name

    try:
        t0 = time.perf_counter()
        ctx.session.execute(text("SELECT 1"))
        latency = (time.perf_counter() - t0) * 1000
        return OperationResult.ok(
            DatabaseHealth(connected=True, backend=backend, latency_ms=round(latency, 2)),
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.warning("database_unreachable", backend=backend, error=str(exc))
        return OperationResult.fail(
            "UNAVAILABLE",
            f"Database unreachable: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )
