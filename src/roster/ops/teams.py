"""
Team operations.

A team may reference one coach and a coach may be bound to at most one
team.  Referencing an unknown coach fails with ``VALIDATION_FAILED``;
referencing a coach already bound elsewhere fails with ``CONFLICT``.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy.exc import IntegrityError

from roster.core.errors import ConflictError, EntityNotFoundError, RosterError, ValidationError
from roster.core.logging import get_logger
from roster.core.mapdiff import difference, snapshot
from roster.core.orm.tables import TeamTable
from roster.core.repositories import CoachRepository, PlayerRepository, TeamRepository
from roster.ops.context import OperationContext
from roster.ops.requests import CreateTeamRequest, ListRequest, UpdateTeamRequest
from roster.ops.responses import TeamDetail
from roster.ops.result import OperationResult, PagedResult, start_timer

logger = get_logger(__name__)


def _to_detail(ctx: OperationContext, row: TeamTable) -> TeamDetail:
    players = PlayerRepository(ctx.session).find_by_team(row.id)
    return TeamDetail(
        id=row.id,
        name=row.name,
        coach_id=row.coach_id,
        player_ids=[p.id for p in players],
    )


def _check_coach(ctx: OperationContext, coach_id: int | None, team_id: int | None) -> None:
    """Raise unless *coach_id* is free to coach *team_id*."""
    if coach_id is None:
        return
    if not CoachRepository(ctx.session).exists(coach_id):
        raise ValidationError(f"Coach {coach_id} does not exist").with_context(coach_id=coach_id)
    bound = TeamRepository(ctx.session).find_by_coach(coach_id)
    if bound is not None and bound.id != team_id:
        raise ConflictError(
            f"Coach {coach_id} already coaches team {bound.id}"
        ).with_context(coach_id=coach_id, team_id=bound.id)


def create_team(
    ctx: OperationContext,
    request: CreateTeamRequest,
) -> OperationResult[TeamDetail]:
    """Store a new team."""
    timer = start_timer()
    repo = TeamRepository(ctx.session)

    try:
        if repo.exists(request.id):
            raise ConflictError(f"Team {request.id} already exists").with_context(team_id=request.id)
        _check_coach(ctx, request.coach_id, request.id)

        if ctx.dry_run:
            return OperationResult.ok(
                TeamDetail(id=request.id or 0, name=request.name, coach_id=request.coach_id),
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True},
            )

        stored = repo.save(TeamTable(id=request.id, name=request.name, coach_id=request.coach_id))
        repo.commit()

        logger.info("team_created", team_id=stored.id, coach_id=stored.coach_id)
        return OperationResult.ok(_to_detail(ctx, stored), elapsed_ms=timer.elapsed_ms)
    except RosterError as exc:
        repo.rollback()
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except IntegrityError as exc:
        repo.rollback()
        conflict = ConflictError(f"Team could not be stored: {exc.orig}", cause=exc)
        return OperationResult.from_error(conflict, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="create_team", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to create team: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def get_team(
    ctx: OperationContext,
    team_id: int,
) -> OperationResult[TeamDetail]:
    """Get a single team by id."""
    timer = start_timer()

    try:
        row = TeamRepository(ctx.session).find_one(team_id)
        if row is None:
            return OperationResult.fail(
                "NOT_FOUND",
                f"Team {team_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_to_detail(ctx, row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_team", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to get team: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def list_teams(
    ctx: OperationContext,
    request: ListRequest,
) -> PagedResult[TeamDetail]:
    timer = start_timer()

    try:
        rows, total = TeamRepository(ctx.session).find_all(
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
        logger.exception("op_failed", op="list_teams", error=str(exc))
        return PagedResult.fail(
            "INTERNAL",
            f"Failed to list teams: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def update_team(
    ctx: OperationContext,
    request: UpdateTeamRequest,
) -> OperationResult[TeamDetail]:
    """Replace a known team; unknown ids fail with ``NOT_FOUND``."""
    timer = start_timer()
    repo = TeamRepository(ctx.session)

    try:
        existing = repo.find_one(request.id)
        if existing is None:
            raise EntityNotFoundError("Don't know team", entity=asdict(request))
        _check_coach(ctx, request.coach_id, request.id)

        before = snapshot(_to_detail(ctx, existing))

        if ctx.dry_run:
            preview = TeamDetail(
                id=request.id,
                name=request.name,
                coach_id=request.coach_id,
                player_ids=list(before["player_ids"]),
            )
            return OperationResult.ok(
                preview,
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True, "changes": difference(before, snapshot(preview))},
            )

        stored = repo.save(TeamTable(id=request.id, name=request.name, coach_id=request.coach_id))
        repo.commit()

        detail = _to_detail(ctx, stored)
        changes = difference(before, snapshot(detail))
        logger.info("team_updated", team_id=detail.id, changes=changes)
        return OperationResult.ok(detail, elapsed_ms=timer.elapsed_ms, metadata={"changes": changes})
    except RosterError as exc:
        repo.rollback()
        logger.info(
            "team_update_rejected",
            team_id=request.id,
            reason=exc.code,
            error=exc.to_dict(),
        )
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except IntegrityError as exc:
        repo.rollback()
        conflict = ConflictError(f"Team could not be stored: {exc.orig}", cause=exc)
        return OperationResult.from_error(conflict, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="update_team", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to update team: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def delete_team(
    ctx: OperationContext,
    team_id: int,
) -> OperationResult[dict]:
    """Delete a team.  Its players stay, unassigned."""
    timer = start_timer()
    repo = TeamRepository(ctx.session)

    if ctx.dry_run:
        return OperationResult.ok(
            {"dry_run": True, "would_delete": team_id},
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        if not repo.delete(team_id):
            return OperationResult.fail(
                "NOT_FOUND",
                f"Team {team_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        repo.commit()
        logger.info("team_deleted", team_id=team_id)
        return OperationResult.ok({"id": team_id, "deleted": True}, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="delete_team", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to delete team: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )
