"""
CLI: ``roster db`` — database management commands.
"""

from __future__ import annotations

import typer

from roster.cli.utils import make_context, output_result

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL or SQLite path"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without changes"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Initialise database schema (create tables)."""
    from roster.ops.database import initialize_database

    ctx, _session = make_context(database, dry_run=dry_run)
    output_result(initialize_database(ctx), as_json=json_out, title="Database Init")


@app.command()
def health(
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Check database connectivity."""
    from roster.ops.database import check_database_health

    ctx, _session = make_context(database)
    output_result(check_database_health(ctx), as_json=json_out, title="Database Health")
