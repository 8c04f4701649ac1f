"""SQLAlchemy 2.0 ORM layer for roster.

Modules
-------
base        RosterBase (declarative base) + TimestampMixin
session     Engine factory, RosterSession, init_schema
tables      CoachTable, TeamTable, PlayerTable, Position
"""

from __future__ import annotations

from roster.core.orm.base import RosterBase, TimestampMixin
from roster.core.orm.session import (
    RosterSession,
    create_roster_engine,
    init_schema,
    roster_session_factory,
)
from roster.core.orm.tables import CoachTable, PlayerTable, Position, TeamTable

__all__ = [
    "RosterBase",
    "TimestampMixin",
    "create_roster_engine",
    "RosterSession",
    "roster_session_factory",
    "init_schema",
    "CoachTable",
    "TeamTable",
    "PlayerTable",
    "Position",
]
