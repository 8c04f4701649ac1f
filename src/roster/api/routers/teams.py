"""
Teams router.

Endpoints:
    GET    /teams          List teams
    POST   /teams          Create a team (201 + Location)
    GET    /teams/{id}     Get a team
    PUT    /teams/{id}     Replace a known team (404 if unknown)
    DELETE /teams/{id}     Delete a team
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Request, Response

from roster.api.deps import OpContext, Pagination
from roster.api.schemas.common import PagedResponse, PageMeta, ProblemDetail
from roster.api.schemas.entities import TeamBody, TeamSchema
from roster.api.utils import _dc, _handle_error

router = APIRouter(prefix="/teams")

_NOT_FOUND = {404: {"model": ProblemDetail, "description": "Team not found"}}
_REJECTED = {
    400: {"model": ProblemDetail, "description": "Unknown coach"},
    409: {"model": ProblemDetail, "description": "Coach already bound to another team"},
}


@router.get("", response_model=PagedResponse[TeamSchema])
def list_teams(ctx: OpContext, pagination: Pagination, request: Request):
    """List teams ordered by id."""
    from roster.ops.requests import ListRequest
    from roster.ops.teams import list_teams as _list

    result = _list(ctx, ListRequest(limit=pagination.limit, offset=pagination.offset))

    if not result.success:
        return _handle_error(result, request)

    return {
        "data": [_dc(t) for t in result.data or []],
        "page": PageMeta.from_result(result.total, result.limit, result.offset).model_dump(),
        "elapsed_ms": round(result.elapsed_ms, 2),
    }


@router.post("", status_code=201, response_model=TeamSchema, responses=_REJECTED)
def create_team(ctx: OpContext, body: TeamBody, request: Request, response: Response):
    """Create a team, optionally bound to an existing coach."""
    from roster.ops.requests import CreateTeamRequest
    from roster.ops.teams import create_team as _create

    result = _create(ctx, CreateTeamRequest(id=body.id, name=body.name, coach_id=body.coach_id))

    if not result.success:
        return _handle_error(result, request)

    response.headers["Location"] = str(request.url_for("get_team", team_id=result.data.id))
    return _dc(result.data)


@router.get("/{team_id}", response_model=TeamSchema, responses=_NOT_FOUND)
def get_team(
    ctx: OpContext,
    request: Request,
    team_id: int = Path(..., description="Team ID"),
):
    """Get a team by id, including the ids of its players."""
    from roster.ops.teams import get_team as _get

    result = _get(ctx, team_id)

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.put("/{team_id}", response_model=TeamSchema, responses={**_NOT_FOUND, **_REJECTED})
def update_team(
    ctx: OpContext,
    body: TeamBody,
    request: Request,
    team_id: int = Path(..., description="Team ID"),
):
    """Replace a known team; unknown ids are rejected with 404."""
    from roster.ops.requests import UpdateTeamRequest
    from roster.ops.teams import update_team as _update

    result = _update(ctx, UpdateTeamRequest(id=team_id, name=body.name, coach_id=body.coach_id))

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.delete("/{team_id}", status_code=204, responses=_NOT_FOUND)
def delete_team(
    ctx: OpContext,
    request: Request,
    team_id: int = Path(..., description="Team ID"),
):
    """Delete a team.  Its players are kept, unassigned."""
    from roster.ops.teams import delete_team as _delete

    result = _delete(ctx, team_id)

    if not result.success:
        return _handle_error(result, request)

    return Response(status_code=204)
