"""
CLI utility helpers — output formatting and session management.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.orm import Session

from roster.core.orm.session import create_roster_engine, init_schema, roster_session_factory
from roster.ops.context import OperationContext
from roster.ops.result import OperationResult, PagedResult

console = Console()
err_console = Console(stderr=True)


# ── Session helper ───────────────────────────────────────────────────────


def database_url(database: str | None = None) -> str:
    """Resolve ``--database``: a SQLAlchemy URL, a SQLite file path, or the configured default."""
    if database is None:
        from roster.api.settings import RosterAPISettings

        return RosterAPISettings().database_url
    if "://" in database:
        return database
    return f"sqlite:///{database}"


def open_session(database: str | None = None) -> Session:
    """Open a session on *database*, creating missing tables first."""
    engine = create_roster_engine(database_url(database))
    init_schema(engine)
    return roster_session_factory(engine)()


def make_context(
    database: str | None = None,
    *,
    dry_run: bool = False,
) -> tuple[OperationContext, Session]:
    """Create an ``OperationContext`` + session pair for CLI commands."""
    session = open_session(database)
    ctx = OperationContext(session=session, caller="cli", dry_run=dry_run)
    return ctx, session


# ── Output helpers ───────────────────────────────────────────────────────


def _to_dict(obj: Any) -> dict[str, Any]:
    """Convert dataclass / pydantic model / dict to plain dict."""
    if hasattr(obj, "model_dump"):
        d = obj.model_dump()
    elif hasattr(obj, "__dataclass_fields__"):
        d = asdict(obj)
    elif isinstance(obj, dict):
        d = obj
    else:
        return {"value": str(obj)}
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in d.items()}


def fail(code: str, message: str) -> None:
    """Print an error line and exit with status 1."""
    err_console.print(f"[bold red]Error[/bold red] ({code}): {message}")
    raise typer.Exit(code=1)


def output_result(
    result: OperationResult,
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render an ``OperationResult`` to the terminal."""
    if not result.success:
        err = result.error
        fail(err.code if err else "ERROR", err.message if err else "Unknown error")

    data = result.data

    if as_json:
        console.print_json(json.dumps(_to_dict(data), default=str))
        return

    _print_dict(_to_dict(data), title=title)
    changes = result.metadata.get("changes")
    if changes:
        _print_dict(changes, title="Changes")


def output_paged(
    result: PagedResult,
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render a ``PagedResult`` to the terminal with pagination info."""
    if not result.success:
        err = result.error
        fail(err.code if err else "ERROR", err.message if err else "Unknown error")

    items = result.data or []

    if as_json:
        payload = {
            "items": [_to_dict(d) for d in items],
            "total": result.total,
            "limit": result.limit,
            "offset": result.offset,
            "has_more": result.has_more,
        }
        console.print_json(json.dumps(payload, default=str))
        return

    if not items:
        console.print("[dim]No items.[/dim]")
        return

    _print_table(items, title=title)
    console.print(
        f"\n[dim]Showing {len(items)} of {result.total}"
        f" (offset {result.offset})[/dim]"
    )


# ── Private helpers ──────────────────────────────────────────────────────


def _print_table(items: list, *, title: str = "") -> None:
    """Render a list of dataclasses/dicts as a Rich table."""
    first = _to_dict(items[0])
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in first:
        table.add_column(col, overflow="fold")
    for item in items:
        d = _to_dict(item)
        table.add_row(*(str(v) for v in d.values()))
    console.print(table)


def _print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {escape(str(v))}")
