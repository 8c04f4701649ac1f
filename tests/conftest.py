"""
Shared pytest fixtures for roster tests.

- ``engine`` / ``session``: in-memory SQLite with every table created
- ``ctx`` / ``dry_ctx``: OperationContext bound to the session
- ``settings`` / ``app`` / ``client``: FastAPI app on a private in-memory database
- ``make_coach`` / ``make_team`` / ``make_player``: persisted entity factories
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from fastapi.testclient import TestClient

from roster.api.app import create_app
from roster.api.settings import RosterAPISettings
from roster.core.orm import (
    CoachTable,
    PlayerTable,
    Position,
    RosterSession,
    TeamTable,
    create_roster_engine,
    init_schema,
)
from roster.ops.context import OperationContext


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark API tests as integration and everything else as unit."""
    root = Path(__file__).parent
    for item in items:
        test_path = Path(item.path).relative_to(root)
        if test_path.parts and test_path.parts[0] == "api":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any configure_logging() a test (or app factory) performed."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    eng = create_roster_engine("sqlite:///:memory:")
    init_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine) -> Generator[RosterSession, None, None]:
    with RosterSession(bind=engine) as sess:
        yield sess


@pytest.fixture
def ctx(session) -> OperationContext:
    return OperationContext(session=session, caller="test")


@pytest.fixture
def dry_ctx(session) -> OperationContext:
    return OperationContext(session=session, caller="test", dry_run=True)


# =============================================================================
# Entity factories
# =============================================================================


@pytest.fixture
def make_coach(session):
    def _make(first_name: str = "Jupp", last_name: str = "Heynckes", **kw) -> CoachTable:
        coach = CoachTable(first_name=first_name, last_name=last_name, **kw)
        session.add(coach)
        session.commit()
        return coach

    return _make


@pytest.fixture
def make_team(session):
    def _make(name: str = "Borussia", coach_id: int | None = None, **kw) -> TeamTable:
        team = TeamTable(name=name, coach_id=coach_id, **kw)
        session.add(team)
        session.commit()
        return team

    return _make


@pytest.fixture
def make_player(session):
    def _make(
        name: str = "Gerd",
        market_value: float = 1000.0,
        position: Position | None = Position.STRIKER,
        team_id: int | None = None,
        **kw,
    ) -> PlayerTable:
        player = PlayerTable(
            name=name, market_value=market_value, position=position, team_id=team_id, **kw
        )
        session.add(player)
        session.commit()
        return player

    return _make


# =============================================================================
# API
# =============================================================================


@pytest.fixture
def settings() -> RosterAPISettings:
    return RosterAPISettings(
        database_url="sqlite:///:memory:",
        log_level="INFO",
        log_json=True,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan running (tables created)."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
