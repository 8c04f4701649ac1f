"""
FastAPI application factory.

``create_app()`` wires settings, the database engine, middleware,
routers, error handlers, and lifespan events into a single ``FastAPI``
instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.deps import get_settings
from roster.api.middleware.errors import unhandled_exception_handler
from roster.api.middleware.request_id import RequestIDMiddleware
from roster.api.middleware.timing import TimingMiddleware
from roster.api.settings import RosterAPISettings
from roster.core.logging import configure_logging, get_logger
from roster.core.orm.session import create_roster_engine, init_schema


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — create tables on startup, dispose the engine on shutdown."""
    log = get_logger("roster.api")
    log.info("api_starting", version=app.version)

    engine = app.state.engine
    tables = init_schema(engine)
    log.info("schema_ready", backend=engine.dialect.name, tables=tables)

    yield

    engine.dispose()
    log.info("api_stopped")


def create_app(
    *,
    settings: RosterAPISettings | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : RosterAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    """

    settings = settings or get_settings()

    configure_logging(level=settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.engine = create_roster_engine(settings.database_url, echo=settings.database_echo)

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from roster.api.routers import coaches, health, players, teams

    prefix = settings.api_prefix

    # Health endpoints at root level (no prefix) for container healthchecks
    app.include_router(health.router)

    app.include_router(coaches.router, prefix=prefix, tags=["coaches"])
    app.include_router(teams.router, prefix=prefix, tags=["teams"])
    app.include_router(players.router, prefix=prefix, tags=["players"])

    return app
