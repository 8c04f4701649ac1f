"""SQLAlchemy 2.0 ORM table definitions for roster.

Three entities, all keyed by integer identifiers:

* ``coaches``  — a coach is associated with at most one team
* ``teams``    — owns the coach link (``coach_id`` is unique) and players
* ``players``   — name, market value and a :class:`Position`

Usage::

    from roster.core.orm import RosterBase, create_roster_engine

    engine = create_roster_engine("sqlite:///roster.db")
    RosterBase.metadata.create_all(engine)
"""

from __future__ import annotations

import enum

from sqlalchemy import Enum, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster.core.orm.base import RosterBase, TimestampMixin


class Position(str, enum.Enum):
    """Playing position of a :class:`PlayerTable`."""

    STRIKER = "STRIKER"
    MIDFIELD = "MIDFIELD"
    DEFENSE = "DEFENSE"
    GOALKEEPER = "GOALKEEPER"


class CoachTable(TimestampMixin, RosterBase):
    __tablename__ = "coaches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(Text)
    last_name: Mapped[str | None] = mapped_column(Text)

    # --- relationships ---
    team: Mapped[TeamTable | None] = relationship(
        "TeamTable", back_populates="coach", uselist=False
    )


class TeamTable(TimestampMixin, RosterBase):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    coach_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("coaches.id", ondelete="SET NULL"), unique=True, default=None
    )

    # --- relationships ---
    coach: Mapped[CoachTable | None] = relationship("CoachTable", back_populates="team")
    players: Mapped[list[PlayerTable]] = relationship(
        "PlayerTable", back_populates="team", order_by="PlayerTable.id"
    )


class PlayerTable(TimestampMixin, RosterBase):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text)
    market_value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    position: Mapped[Position | None] = mapped_column(
        Enum(Position, native_enum=False, length=16), default=None
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), default=None
    )

    # --- relationships ---
    team: Mapped[TeamTable | None] = relationship("TeamTable", back_populates="players")


__all__ = ["Position", "CoachTable", "TeamTable", "PlayerTable"]
