"""
Entity schemas — request bodies and representations for coaches, teams
and players.

Bodies carry an optional ``id``.  On create it becomes the identifier
(assigned by the database when omitted); on update the path identifier
wins and a body ``id`` is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roster.core.orm.tables import Position

# ── Coaches ──────────────────────────────────────────────────────────────


class CoachBody(BaseModel):
    """Request body for creating or replacing a coach."""

    id: int | None = Field(default=None, ge=1, description="Identifier (create only)")
    first_name: str | None = Field(default=None, description="Given name")
    last_name: str | None = Field(default=None, description="Family name")


class CoachSchema(BaseModel):
    """Coach representation."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    team_id: int | None = None


# ── Teams ────────────────────────────────────────────────────────────────


class TeamBody(BaseModel):
    """Request body for creating or replacing a team."""

    id: int | None = Field(default=None, ge=1, description="Identifier (create only)")
    name: str = Field(..., min_length=1, description="Team name")
    coach_id: int | None = Field(default=None, description="Coach bound to this team")


class TeamSchema(BaseModel):
    """Team representation."""

    id: int
    name: str
    coach_id: int | None = None
    player_ids: list[int] = []


# ── Players ──────────────────────────────────────────────────────────────


class PlayerBody(BaseModel):
    """Request body for creating or replacing a player."""

    id: int | None = Field(default=None, ge=1, description="Identifier (create only)")
    name: str | None = Field(default=None, description="Player name")
    market_value: float = Field(default=0.0, description="Market value")
    position: Position | None = Field(
        default=None,
        description="One of STRIKER, MIDFIELD, DEFENSE, GOALKEEPER",
    )
    team_id: int | None = Field(default=None, description="Team the player belongs to")


class PlayerSchema(BaseModel):
    """Player representation."""

    id: int
    name: str | None = None
    market_value: float = 0.0
    position: Position | None = None
    team_id: int | None = None
