"""SQLAlchemy engine factory, session class and schema bootstrap.

This module provides:

* ``create_roster_engine``    -- Create a SA engine from a URL.
* ``RosterSession``           -- Session with ``expire_on_commit=False``.
* ``roster_session_factory``  -- ``sessionmaker`` producing ``RosterSession``.
* ``init_schema``             -- Create every roster table (idempotent).

Tags:
    roster, orm, sqlalchemy, session, engine

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine as _sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from roster.core.logging import get_logger

logger = get_logger(__name__)


def create_roster_engine(
    url: str = "sqlite:///roster.db",
    *,
    echo: bool = False,
    pool_size: int | None = None,
    max_overflow: int | None = None,
    pool_timeout: int | None = None,
    **kwargs: Any,
) -> Engine:
    """Create a SQLAlchemy engine with sane defaults.

    Parameters
    ----------
    url:
        Database URL (``sqlite:///…``, ``postgresql://…``, etc.)
    echo:
        If ``True``, log all SQL.
    pool_size, max_overflow, pool_timeout:
        Connection pool parameters (ignored for SQLite).
    **kwargs:
        Extra arguments forwarded to ``sqlalchemy.create_engine``.
    """

    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        # An in-memory database only lives as long as its single connection
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs.setdefault("poolclass", StaticPool)

        engine = _sa_create_engine(url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection: Any, _rec: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    pool_kwargs: dict[str, Any] = {}
    if pool_size is not None:
        pool_kwargs["pool_size"] = pool_size
    if max_overflow is not None:
        pool_kwargs["max_overflow"] = max_overflow
    if pool_timeout is not None:
        pool_kwargs["pool_timeout"] = pool_timeout

    return _sa_create_engine(url, echo=echo, **pool_kwargs, **kwargs)


class RosterSession(Session):
    """Pre-configured session with ``expire_on_commit=False``.

    Prevents lazy-load surprises after commit, when routers serialise
    entities that were loaded inside an operation.
    """

    def __init__(self, bind: Engine | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("expire_on_commit", False)
        super().__init__(bind=bind, **kwargs)


def roster_session_factory(engine: Engine) -> sessionmaker[RosterSession]:
    """Return a ``sessionmaker`` bound to *engine* that produces ``RosterSession`` instances."""
    return sessionmaker(bind=engine, class_=RosterSession)


def init_schema(engine: Engine) -> list[str]:
    """Create all roster tables that do not exist yet.

    Returns the names of the tables known to the metadata.
    """
    from roster.core.orm.base import RosterBase
    from roster.core.orm import tables  # noqa: F401  (registers mappers)

    RosterBase.metadata.create_all(engine)
    names = sorted(RosterBase.metadata.tables)
    logger.debug("schema_initialized", tables=names, url=str(engine.url))
    return names
