"""
CLI: ``roster teams`` — team management.
"""

from __future__ import annotations

import typer

from roster.cli.utils import make_context, output_paged, output_result

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_teams(
    limit: int = typer.Option(50, "--limit", "-n"),
    offset: int = typer.Option(0, "--offset"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List teams."""
    from roster.ops.requests import ListRequest
    from roster.ops.teams import list_teams as _list

    ctx, _ = make_context(database)
    output_paged(_list(ctx, ListRequest(limit=limit, offset=offset)), as_json=json_out, title="Teams")


@app.command("get")
def get_team(
    team_id: int = typer.Argument(..., help="Team ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show a team."""
    from roster.ops.teams import get_team as _get

    ctx, _ = make_context(database)
    output_result(_get(ctx, team_id), as_json=json_out, title="Team")


@app.command("create")
def create_team(
    name: str = typer.Argument(..., help="Team name"),
    coach_id: int | None = typer.Option(None, "--coach", "-c", help="Coach ID"),
    team_id: int | None = typer.Option(None, "--id", help="Explicit identifier"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create a team."""
    from roster.ops.requests import CreateTeamRequest
    from roster.ops.teams import create_team as _create

    ctx, _ = make_context(database, dry_run=dry_run)
    request = CreateTeamRequest(id=team_id, name=name, coach_id=coach_id)
    output_result(_create(ctx, request), as_json=json_out, title="Created Team")


@app.command("update")
def update_team(
    team_id: int = typer.Argument(..., help="Team ID"),
    name: str = typer.Option(..., "--name", help="Team name"),
    coach_id: int | None = typer.Option(None, "--coach", "-c", help="Coach ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Replace a known team and print the changed fields."""
    from roster.ops.requests import UpdateTeamRequest
    from roster.ops.teams import update_team as _update

    ctx, _ = make_context(database, dry_run=dry_run)
    request = UpdateTeamRequest(id=team_id, name=name, coach_id=coach_id)
    output_result(_update(ctx, request), as_json=json_out, title="Updated Team")


@app.command("delete")
def delete_team(
    team_id: int = typer.Argument(..., help="Team ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Delete a team."""
    from roster.ops.teams import delete_team as _delete

    ctx, _ = make_context(database, dry_run=dry_run)
    output_result(_delete(ctx, team_id), as_json=json_out, title="Deleted Team")
