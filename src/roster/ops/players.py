"""
Player operations.

A player may be assigned to one team; assigning to an unknown team fails
with ``VALIDATION_FAILED``.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy.exc import IntegrityError

from roster.core.errors import ConflictError, EntityNotFoundError, RosterError, ValidationError
from roster.core.logging import get_logger
from roster.core.mapdiff import difference, snapshot
from roster.core.orm.tables import PlayerTable
from roster.core.repositories import PlayerRepository, TeamRepository
from roster.ops.context import OperationContext
from roster.ops.requests import CreatePlayerRequest, ListRequest, UpdatePlayerRequest
from roster.ops.responses import PlayerDetail
from roster.ops.result import OperationResult, PagedResult, start_timer

logger = get_logger(__name__)


def _to_detail(row: PlayerTable) -> PlayerDetail:
    return PlayerDetail(
        id=row.id,
        name=row.name,
        market_value=row.market_value,
        position=row.position,
        team_id=row.team_id,
    )


def _to_row(request: CreatePlayerRequest | UpdatePlayerRequest) -> PlayerTable:
    return PlayerTable(
        id=request.id,
        name=request.name,
        market_value=request.market_value,
        position=request.position,
        team_id=request.team_id,
    )


def _check_team(ctx: OperationContext, team_id: int | None) -> None:
    if team_id is not None and not TeamRepository(ctx.session).exists(team_id):
        raise ValidationError(f"Team {team_id} does not exist").with_context(team_id=team_id)


def _payload(request: UpdatePlayerRequest) -> dict:
    payload = asdict(request)
    if request.position is not None:
        payload["position"] = request.position.value
    return payload


def create_player(
    ctx: OperationContext,
    request: CreatePlayerRequest,
) -> OperationResult[PlayerDetail]:
    """Store a new player."""
    timer = start_timer()
    repo = PlayerRepository(ctx.session)

    try:
        if repo.exists(request.id):
            raise ConflictError(f"Player {request.id} already exists").with_context(player_id=request.id)
        _check_team(ctx, request.team_id)

        if ctx.dry_run:
            return OperationResult.ok(
                PlayerDetail(
                    id=request.id or 0,
                    name=request.name,
                    market_value=request.market_value,
                    position=request.position,
                    team_id=request.team_id,
                ),
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True},
            )

        stored = repo.save(_to_row(request))
        repo.commit()

        logger.info("player_created", player_id=stored.id, team_id=stored.team_id)
        return OperationResult.ok(_to_detail(stored), elapsed_ms=timer.elapsed_ms)
    except RosterError as exc:
        repo.rollback()
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except IntegrityError as exc:
        repo.rollback()
        conflict = ConflictError(f"Player could not be stored: {exc.orig}", cause=exc)
        return OperationResult.from_error(conflict, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="create_player", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to create player: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def get_player(
    ctx: OperationContext,
    player_id: int,
) -> OperationResult[PlayerDetail]:
    """Get a single player by id."""
    timer = start_timer()

    try:
        row = PlayerRepository(ctx.session).find_one(player_id)
        if row is None:
            return OperationResult.fail(
                "NOT_FOUND",
                f"Player {player_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_to_detail(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_player", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to get player: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def list_players(
    ctx: OperationContext,
    request: ListRequest,
) -> PagedResult[PlayerDetail]:
    timer = start_timer()

    try:
        rows, total = PlayerRepository(ctx.session).find_all(
            limit=request.limit, offset=request.offset
        )
        return PagedResult.from_items(
            [_to_detail(r) for r in rows],
            total=total,
            limit=request.limit,
            offset=request.offset,
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="list_players", error=str(exc))
        return PagedResult.fail(
            "INTERNAL",
            f"Failed to list players: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def update_player(
    ctx: OperationContext,
    request: UpdatePlayerRequest,
) -> OperationResult[PlayerDetail]:
    """Replace a known player; unknown ids fail with ``NOT_FOUND``."""
    timer = start_timer()
    repo = PlayerRepository(ctx.session)

    try:
        existing = repo.find_one(request.id)
        if existing is None:
            raise EntityNotFoundError("Don't know player", entity=_payload(request))
        _check_team(ctx, request.team_id)

        before = snapshot(_to_detail(existing))

        if ctx.dry_run:
            preview = _to_detail(_to_row(request))
            return OperationResult.ok(
                preview,
                elapsed_ms=timer.elapsed_ms,
                metadata={"dry_run": True, "changes": difference(before, snapshot(preview))},
            )

        stored = repo.save(_to_row(request))
        repo.commit()

        detail = _to_detail(stored)
        changes = difference(before, snapshot(detail))
        logger.info("player_updated", player_id=detail.id, changes=changes)
        return OperationResult.ok(detail, elapsed_ms=timer.elapsed_ms, metadata={"changes": changes})
    except RosterError as exc:
        repo.rollback()
        logger.info(
            "player_update_rejected",
            player_id=request.id,
            reason=exc.code,
            error=exc.to_dict(),
        )
        return OperationResult.from_error(exc, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="update_player", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to update player: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )


def delete_player(
    ctx: OperationContext,
    player_id: int,
) -> OperationResult[dict]:
    timer = start_timer()
    repo = PlayerRepository(ctx.session)

    if ctx.dry_run:
        return OperationResult.ok(
            {"dry_run": True, "would_delete": player_id},
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        if not repo.delete(player_id):
            return OperationResult.fail(
                "NOT_FOUND",
                f"Player {player_id} not found",
                elapsed_ms=timer.elapsed_ms,
            )
        repo.commit()
        logger.info("player_deleted", player_id=player_id)
        return OperationResult.ok({"id": player_id, "deleted": True}, elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        repo.rollback()
        logger.exception("op_failed", op="delete_player", error=str(exc))
        return OperationResult.fail(
            "INTERNAL",
            f"Failed to delete player: {exc}",
            elapsed_ms=timer.elapsed_ms,
        )
