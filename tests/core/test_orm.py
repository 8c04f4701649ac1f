"""Tests for the roster ORM layer — tables, engine and session helpers."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool

from roster.core.orm import (
    CoachTable,
    PlayerTable,
    Position,
    RosterBase,
    RosterSession,
    TeamTable,
    create_roster_engine,
    init_schema,
    roster_session_factory,
)


# =============================================================================
# Engine / schema
# =============================================================================


class TestEngine:
    def test_memory_engine_uses_static_pool(self):
        engine = create_roster_engine("sqlite:///:memory:")
        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_foreign_keys_enabled(self, engine):
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_file_engine(self, tmp_path):
        engine = create_roster_engine(f"sqlite:///{tmp_path / 'r.db'}")
        init_schema(engine)
        assert (tmp_path / "r.db").exists()
        engine.dispose()


class TestInitSchema:
    def test_creates_all_tables(self, engine):
        names = set(inspect(engine).get_table_names())
        assert {"coaches", "teams", "players"} <= names

    def test_returns_table_names(self, engine):
        assert init_schema(engine) == ["coaches", "players", "teams"]

    def test_idempotent(self, engine):
        init_schema(engine)
        init_schema(engine)
        assert "coaches" in inspect(engine).get_table_names()

    def test_metadata_knows_tables(self):
        assert set(RosterBase.metadata.tables) == {"coaches", "teams", "players"}


class TestSession:
    def test_expire_on_commit_disabled(self, engine):
        with RosterSession(bind=engine) as sess:
            coach = CoachTable(first_name="Ottmar", last_name="Hitzfeld")
            sess.add(coach)
            sess.commit()
            assert "first_name" in coach.__dict__

    def test_factory_produces_roster_sessions(self, engine):
        factory = roster_session_factory(engine)
        with factory() as sess:
            assert isinstance(sess, RosterSession)


# =============================================================================
# Tables
# =============================================================================


class TestCoachTable:
    def test_autoincrement_id(self, session):
        a = CoachTable(first_name="A")
        b = CoachTable(first_name="B")
        session.add_all([a, b])
        session.commit()
        assert a.id is not None
        assert b.id == a.id + 1

    def test_timestamps_populated(self, session):
        coach = CoachTable(first_name="A")
        session.add(coach)
        session.commit()
        session.refresh(coach)
        assert coach.created_at is not None

    def test_names_nullable(self, session):
        coach = CoachTable()
        session.add(coach)
        session.commit()
        assert coach.first_name is None


class TestTeamTable:
    def test_coach_relationship(self, session, make_coach):
        coach = make_coach()
        team = TeamTable(name="Bayern", coach_id=coach.id)
        session.add(team)
        session.commit()
        session.refresh(coach)
        assert coach.team.id == team.id
        assert team.coach.id == coach.id

    def test_coach_unique(self, session, make_coach, make_team):
        coach = make_coach()
        make_team(name="One", coach_id=coach.id)
        session.add(TeamTable(name="Two", coach_id=coach.id))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_name_required(self, session):
        session.add(TeamTable(name=None))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_unknown_coach_rejected_by_foreign_key(self, session):
        session.add(TeamTable(name="Ghosts", coach_id=999))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()


class TestPlayerTable:
    def test_position_round_trip(self, session, make_player):
        player = make_player(position=Position.GOALKEEPER)
        session.expire_all()
        stored = session.get(PlayerTable, player.id)
        assert stored.position is Position.GOALKEEPER

    def test_position_stored_as_name(self, session, make_player):
        player = make_player(position=Position.DEFENSE)
        raw = session.execute(
            text("SELECT position FROM players WHERE id = :id"), {"id": player.id}
        ).scalar()
        assert raw == "DEFENSE"

    def test_market_value_default(self, session):
        player = PlayerTable(name="Franz")
        session.add(player)
        session.commit()
        assert player.market_value == 0.0

    def test_team_players_ordered(self, session, make_team, make_player):
        team = make_team()
        p2 = make_player(name="B", team_id=team.id)
        p1 = make_player(name="A", team_id=team.id)
        session.refresh(team)
        assert [p.id for p in team.players] == [p2.id, p1.id]


class TestPosition:
    def test_members(self):
        assert [p.value for p in Position] == ["STRIKER", "MIDFIELD", "DEFENSE", "GOALKEEPER"]

    def test_str_enum(self):
        assert Position("MIDFIELD") is Position.MIDFIELD
        assert Position.MIDFIELD == "MIDFIELD"
