"""
Coach operations.

CRUD for coaches.  ``update_coach`` refuses to create: an unknown
identifier fails with ``NOT_FOUND`` and echoes the rejected payload.
Successful updates log the changed fields.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy.exc import IntegrityError

from roster.core.errors import ConflictError, EntityNotFoundError, RosterError
from roster.core.logging import get_logger
from roster.core.mapdiff import difference, snapshot
from roster.core.orm.tables import CoachTable
from roster.core.repositories import CoachRepository, TeamRepository
from roster.ops.context import OperationContext
from roster.ops.requests import CreateCoachRequest, ListRequest, UpdateCoachRequest
from roster.ops.responses import CoachDetail
from roster.ops.result import OperationResult, PagedResult, start_timer

logger = get_logger(__name__)


def _to_detail(ctx: OperationContext, row: CoachTable) -> CoachDetail:
    team = TeamRepository(ctx.session).find_by_coach(row.id)
    return CoachDetail(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        team_id=team.id if team is not None else None,
    )


def create_coach(
    ctx: OperationContext,
    request: CreateCoachRequest,
) -> OperationResult[CoachDetail]:
    """Store a new coach and return it with its assigned id."""
    timer = start_timer()
    repo = CoachRepository(ctx.session)

    try:
        if repo.exists(request.id):
            raise ConflictError(f"Coach {request.id} already exists").with_context(coach_id=request.id)

        if ctx.dry_run:
            return OperationResult.ok(
                CoachDetail(id=request.id or 0, first_name=request.first_name, last_name=request.last_name),
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True},
            )

        stored = repo.save(
            CoachTable(id=request.id, first_name=request.first_name, last_name=request.last_name)
        )
        repo.commit()

        logger.info("coach_created", coach_id=stored.id)
        return OperationResult.ok(_to_detail(ctx, stored), elapsed_ms=timer.elapsed_ms)
    except RosterError as exc:
        repo.rollback()
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except IntegrityError as exc:
        repo.rollback()
        conflict = ConflictError(f"Coach could not be stored: {exc.orig}", cause=exc)
        return OperationResult.from_error(conflict, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="create_coach", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to create coach: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def get_coach(
    ctx: OperationContext,
    coach_id: int,
) -> OperationResult[CoachDetail]:
    """Get a single coach by id."""
    timer = start_timer()

    try:
        row = CoachRepository(ctx.session).find_one(coach_id)
        if row is None:
            return OperationResult.fail(
                "NOT_FOUND",
                f"Coach {coach_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_to_detail(ctx, row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_coach", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to get coach: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def list_coaches(
    ctx: OperationContext,
    request: ListRequest,
) -> PagedResult[CoachDetail]:
    """List coaches ordered by id."""
    timer = start_timer()

    try:
        rows, total = CoachRepository(ctx.session).find_all(
            limit=request.limit, offset=request.offset
        )
        return PagedResult.from_items(
            [_to_detail(ctx, r) for r in rows],
            total=total,
            limit=request.limit,
            offset=request.offset,
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="list_coaches", error=str(exc))
        return PagedResult.fail(
            "INTERNAL",
            f"Failed to list coaches: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def update_coach(
    ctx: OperationContext,
    request: UpdateCoachRequest,
) -> OperationResult[CoachDetail]:
    """Replace a known coach.

    The coach must already exist; this never creates.  The result's
    ``metadata["changes"]`` holds the per-field difference.
    """
    timer = start_timer()
    repo = CoachRepository(ctx.session)

    try:
        existing = repo.find_one(request.id)
        if existing is None:
            raise EntityNotFoundError("Don't know coach", entity=asdict(request))

        before = snapshot(_to_detail(ctx, existing))

        if ctx.dry_run:
            preview = CoachDetail(
                id=request.id,
                first_name=request.first_name,
                last_name=request.last_name,
                team_id=before["team_id"],
            )
            return OperationResult.ok(
                preview,
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True, "changes": difference(before, snapshot(preview))},
            )

        stored = repo.save(
            CoachTable(id=request.id, first_name=request.first_name, last_name=request.last_name)
        )
        repo.commit()

        detail = _to_detail(ctx, stored)
        changes = difference(before, snapshot(detail))
        logger.info("coach_updated", coach_id=detail.id, changes=changes)
        return OperationResult.ok(detail, elapsed_ms=timer.elapsed_ms, metadata={"changes": changes})
    except RosterError as exc:
        repo.rollback()
        logger.info(
            "coach_update_rejected",
            coach_id=request.id,
            reason=exc.code,
            error=exc.to_dict(),
        )
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="update_coach", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to update coach: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def delete_coach(
    ctx: OperationContext,
    coach_id: int,
) -> OperationResult[dict]:
    """Delete a coach.  A team it coached keeps existing without a coach."""
    timer = start_timer()
    repo = CoachRepository(ctx.session)

    if ctx.dry_run:
        return OperationResult.ok(
            {"dry_run": True, "would_delete": coach_id},
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        if not repo.delete(coach_id):
            return OperationResult.fail(
                "NOT_FOUND",
                f"Coach {coach_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        repo.commit()
        logger.info("coach_deleted", coach_id=coach_id)
        return OperationResult.ok({"id": coach_id, "deleted": True}, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="delete_coach", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to delete coach: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )
