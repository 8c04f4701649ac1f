"""
Players router.

Endpoints:
    GET    /players          List players
    POST   /players          Create a player (201 + Location)
    GET    /players/{id}     Get a player
    PUT    /players/{id}     Replace a known player (404 if unknown)
    DELETE /players/{id}     Delete a player
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Request, Response

from roster.api.deps import OpContext, Pagination
from roster.api.schemas.common import PagedResponse, PageMeta, ProblemDetail
from roster.api.schemas.entities import PlayerBody, PlayerSchema
from roster.api.utils import _dc, _handle_error

router = APIRouter(prefix="/players")

_NOT_FOUND = {404: {"model": ProblemDetail, "description": "Player not found"}}
_REJECTED = {400: {"model": ProblemDetail, "description": "Unknown team"}}


@router.get("", response_model=PagedResponse[PlayerSchema])
def list_players(ctx: OpContext, pagination: Pagination, request: Request):
    """List players ordered by id."""
    from roster.ops.players import list_players as _list
    from roster.ops.requests import ListRequest

    result = _list(ctx, ListRequest(limit=pagination.limit, offset=pagination.offset))

    if not result.success:
        return _handle_error(result, request)

    return {
        "data": [_dc(p) for p in result.data or []],
        "page": PageMeta.from_result(result.total, result.limit, result.offset).model_dump(),
        "elapsed_ms": round(result.elapsed_ms, 2),
    }


@router.post("", status_code=201, response_model=PlayerSchema, responses=_REJECTED)
def create_player(ctx: OpContext, body: PlayerBody, request: Request, response: Response):
    """Create a player."""
    from roster.ops.players import create_player as _create
    from roster.ops.requests import CreatePlayerRequest

    result = _create(
        ctx,
        CreatePlayerRequest(
            id=body.id,
            name=body.name,
            market_value=body.market_value,
            position=body.position,
            team_id=body.team_id,
        ),
    )

    if not result.success:
        return _handle_error(result, request)

    response.headers["Location"] = str(request.url_for("get_player", player_id=result.data.id))
    return _dc(result.data)


@router.get("/{player_id}", response_model=PlayerSchema, responses=_NOT_FOUND)
def get_player(
    ctx: OpContext,
    request: Request,
    player_id: int = Path(..., description="Player ID"),
):
    from roster.ops.players import get_player as _get

    result = _get(ctx, player_id)

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.put("/{player_id}", response_model=PlayerSchema, responses={**_NOT_FOUND, **_REJECTED})
def update_player(
    ctx: OpContext,
    body: PlayerBody,
    request: Request,
    player_id: int = Path(..., description="Player ID"),
):
    """Replace a known player; unknown ids are rejected with 404."""
    from roster.ops.players import update_player as _update
    from roster.ops.requests import UpdatePlayerRequest

    result = _update(
        ctx,
        UpdatePlayerRequest(
            id=player_id,
            name=body.name,
            market_value=body.market_value,
            position=body.position,
            team_id=body.team_id,
        ),
    )

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.delete("/{player_id}", status_code=204, responses=_NOT_FOUND)
def delete_player(
    ctx: OpContext,
    request: Request,
    player_id: int = Path(..., description="Player ID"),
):
    from roster.ops.players import delete_player as _delete

    result = _delete(ctx, player_id)

    if not result.success:
        return _handle_error(result, request)

    return Response(status_code=204)
