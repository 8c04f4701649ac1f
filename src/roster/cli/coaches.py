"""
CLI: ``roster coaches`` — coach management.
"""

from __future__ import annotations

import typer

from roster.cli.utils import make_context, output_paged, output_result

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_coaches(
    limit: int = typer.Option(50, "--limit", "-n"),
    offset: int = typer.Option(0, "--offset"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List coaches."""
    from roster.ops.coaches import list_coaches as _list
    from roster.ops.requests import ListRequest

    ctx, _ = make_context(database)
    output_paged(_list(ctx, ListRequest(limit=limit, offset=offset)), as_json=json_out, title="Coaches")


@app.command("get")
def get_coach(
    coach_id: int = typer.Argument(..., help="Coach ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show a coach."""
    from roster.ops.coaches import get_coach as _get

    ctx, _ = make_context(database)
    output_result(_get(ctx, coach_id), as_json=json_out, title="Coach")


@app.command("create")
def create_coach(
    first_name: str | None = typer.Option(None, "--first-name", "-f"),
    last_name: str | None = typer.Option(None, "--last-name", "-l"),
    coach_id: int | None = typer.Option(None, "--id", help="Explicit identifier"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without changes"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create a coach."""
    from roster.ops.coaches import create_coach as _create
    from roster.ops.requests import CreateCoachRequest

    ctx, _ = make_context(database, dry_run=dry_run)
    request = CreateCoachRequest(id=coach_id, first_name=first_name, last_name=last_name)
    output_result(_create(ctx, request), as_json=json_out, title="Created Coach")


@app.command("update")
def update_coach(
    coach_id: int = typer.Argument(..., help="Coach ID"),
    first_name: str | None = typer.Option(None, "--first-name", "-f"),
    last_name: str | None = typer.Option(None, "--last-name", "-l"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without changes"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Replace a known coach and print the changed fields."""
    from roster.ops.coaches import update_coach as _update
    from roster.ops.requests import UpdateCoachRequest

    ctx, _ = make_context(database, dry_run=dry_run)
    request = UpdateCoachRequest(id=coach_id, first_name=first_name, last_name=last_name)
    output_result(_update(ctx, request), as_json=json_out, title="Updated Coach")


@app.command("delete")
def delete_coach(
    coach_id: int = typer.Argument(..., help="Coach ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Delete a coach."""
    from roster.ops.coaches import delete_coach as _delete

    ctx, _ = make_context(database, dry_run=dry_run)
    output_result(_delete(ctx, coach_id), as_json=json_out, title="Deleted Coach")
