"""
Typed request objects for operations.

Each dataclass represents the *input* contract for a single operation
function.  Requests carry only validated, transport-agnostic data — no
raw HTTP bodies, no CLI params.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.core.orm.tables import Position

# ------------------------------------------------------------------ #
# Coaches
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class CreateCoachRequest:
    """Request for :func:`roster.ops.coaches.create_coach`.

    ``id`` is optional; the database assigns one when omitted.
    """

    first_name: str | None = None
    last_name: str | None = None
    id: int | None = None


@dataclass(frozen=True, slots=True)
class UpdateCoachRequest:
    """Request for :func:`roster.ops.coaches.update_coach` (full replacement)."""

    id: int
    first_name: str | None = None
    last_name: str | None = None


# ------------------------------------------------------------------ #
# Teams
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class CreateTeamRequest:
    """Request for :func:`roster.ops.teams.create_team`."""

    name: str
    coach_id: int | None = None
    id: int | None = None


@dataclass(frozen=True, slots=True)
class UpdateTeamRequest:
    """Request for :func:`roster.ops.teams.update_team`."""

    id: int
    name: str
    coach_id: int | None = None


# ------------------------------------------------------------------ #
# Players
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class CreatePlayerRequest:
    """Request for :func:`roster.ops.players.create_player`."""

    name: str | None = None
    market_value: float = 0.0
    position: Position | None = None
    team_id: int | None = None
    id: int | None = None


@dataclass(frozen=True, slots=True)
class UpdatePlayerRequest:
    """Request for :func:`roster.ops.players.update_player`."""

    id: int
    name: str | None = None
    market_value: float = 0.0
    position: Position | None = None
    team_id: int | None = None


# ------------------------------------------------------------------ #
# Listing
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class ListRequest:
    """Pagination for any ``list_*`` operation."""

    limit: int = 50
    offset: int = 0
