"""
Typed response objects for operations.

Each dataclass is the *output* payload of an operation inside the generic
:class:`~roster.ops.result.OperationResult` envelope.  Responses carry only
domain data — no HTTP status codes, no CLI formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from roster.core.orm.tables import Position


@dataclass(frozen=True, slots=True)
class CoachDetail:
    """A coach and the team it is bound to (if any)."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    team_id: int | None = None


@dataclass(frozen=True, slots=True)
class TeamDetail:
    """A team, its coach link and its roster."""

    id: int
    name: str
    coach_id: int | None = None
    player_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class PlayerDetail:
    id: int
    name: str | None = None
    market_value: float = 0.0
    position: Position | None = None
    team_id: int | None = None


@dataclass(frozen=True, slots=True)
class DatabaseInitResult:
    """Result payload for :func:`roster.ops.database.initialize_database`."""

    tables: list[str]
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class DatabaseHealth:
    """Result payload for :func:`roster.ops.database.check_database_health`."""

    connected: bool
    backend: str = "unknown"
    latency_ms: float = 0.0
