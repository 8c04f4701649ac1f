"""
Coaches router.

Endpoints:
    GET    /coaches          List coaches
    POST   /coaches          Create a coach (201 + Location)
    GET    /coaches/{id}     Get a coach
    PUT    /coaches/{id}     Replace a known coach (404 if unknown)
    DELETE /coaches/{id}     Delete a coach
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Request, Response

from roster.api.deps import OpContext, Pagination
from roster.api.schemas.common import PagedResponse, PageMeta, ProblemDetail
from roster.api.schemas.entities import CoachBody, CoachSchema
from roster.api.utils import _dc, _handle_error

router = APIRouter(prefix="/coaches")

_NOT_FOUND = {404: {"model": ProblemDetail, "description": "Coach not found"}}


@router.get("", response_model=PagedResponse[CoachSchema])
def list_coaches(ctx: OpContext, pagination: Pagination, request: Request):
    """List coaches ordered by id."""
    from roster.ops.coaches import list_coaches as _list
    from roster.ops.requests import ListRequest

    result = _list(ctx, ListRequest(limit=pagination.limit, offset=pagination.offset))

    if not result.success:
        return _handle_error(result, request)

    return {
        "data": [_dc(c) for c in result.data or []],
        "page": PageMeta.from_result(result.total, result.limit, result.offset).model_dump(),
        "elapsed_ms": round(result.elapsed_ms, 2),
    }


@router.post(
    "",
    status_code=201,
    response_model=CoachSchema,
    responses={409: {"model": ProblemDetail}},
)
def create_coach(ctx: OpContext, body: CoachBody, request: Request, response: Response):
    """Create a coach.

    Responds ``201 Created`` with a ``Location`` header pointing at the
    new resource.
    """
    from roster.ops.coaches import create_coach as _create
    from roster.ops.requests import CreateCoachRequest

    result = _create(
        ctx,
        CreateCoachRequest(id=body.id, first_name=body.first_name, last_name=body.last_name),
    )

    if not result.success:
        return _handle_error(result, request)

    response.headers["Location"] = str(request.url_for("get_coach", coach_id=result.data.id))
    return _dc(result.data)


@router.get("/{coach_id}", response_model=CoachSchema, responses=_NOT_FOUND)
def get_coach(
    ctx: OpContext,
    request: Request,
    coach_id: int = Path(..., description="Coach ID"),
):
    """Get a coach by id."""
    from roster.ops.coaches import get_coach as _get

    result = _get(ctx, coach_id)

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.put("/{coach_id}", response_model=CoachSchema, responses=_NOT_FOUND)
def update_coach(
    ctx: OpContext,
    body: CoachBody,
    request: Request,
    coach_id: int = Path(..., description="Coach ID"),
):
    """Replace a known coach.

    Unknown ids are rejected with 404; the problem body's
    ``details.entity`` echoes the rejected coach.
    """
    from roster.ops.coaches import update_coach as _update
    from roster.ops.requests import UpdateCoachRequest

    result = _update(
        ctx,
        UpdateCoachRequest(id=coach_id, first_name=body.first_name, last_name=body.last_name),
    )

    if not result.success:
        return _handle_error(result, request)

    return _dc(result.data)


@router.delete("/{coach_id}", status_code=204, responses=_NOT_FOUND)
def delete_coach(
    ctx: OpContext,
    request: Request,
    coach_id: int = Path(..., description="Coach ID"),
):
    """Delete a coach.  A team it coached is left without a coach."""
    from roster.ops.coaches import delete_coach as _delete

    result = _delete(ctx, coach_id)

    if not result.success:
        return _handle_error(result, request)

    return Response(status_code=204)
