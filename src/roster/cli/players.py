"""
CLI: ``roster players`` — player management.
"""

from __future__ import annotations

import typer

from roster.cli.utils import make_context, output_paged, output_result
from roster.core.orm.tables import Position

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_players(
    limit: int = typer.Option(50, "--limit", "-n"),
    offset: int = typer.Option(0, "--offset"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List players."""
    from roster.ops.players import list_players as _list
    from roster.ops.requests import ListRequest

    ctx, _ = make_context(database)
    output_paged(_list(ctx, ListRequest(limit=limit, offset=offset)), as_json=json_out, title="Players")


@app.command("get")
def get_player(
    player_id: int = typer.Argument(..., help="Player ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show a player."""
    from roster.ops.players import get_player as _get

    ctx, _ = make_context(database)
    output_result(_get(ctx, player_id), as_json=json_out, title="Player")


@app.command("create")
def create_player(
    name: str = typer.Argument(..., help="Player name"),
    market_value: float = typer.Option(0.0, "--value", "-v", help="Market value"),
    position: Position | None = typer.Option(None, "--position", "-p", case_sensitive=False),
    team_id: int | None = typer.Option(None, "--team", "-t", help="Team ID"),
    player_id: int | None = typer.Option(None, "--id", help="Explicit identifier"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create a player."""
    from roster.ops.players import create_player as _create
    from roster.ops.requests import CreatePlayerRequest

    ctx, _ = make_context(database, dry_run=dry_run)
    request = CreatePlayerRequest(
        id=player_id,
        name=name,
        market_value=market_value,
        position=position,
        team_id=team_id,
    )
    output_result(_create(ctx, request), as_json=json_out, title="Created Player")


@app.command("update")
def update_player(
    player_id: int = typer.Argument(..., help="Player ID"),
    name: str | None = typer.Option(None, "--name"),
    market_value: float = typer.Option(0.0, "--value", "-v", help="Market value"),
    position: Position | None = typer.Option(None, "--position", "-p", case_sensitive=False),
    team_id: int | None = typer.Option(None, "--team", "-t", help="Team ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Replace a known player and print the changed fields."""
    from roster.ops.players import update_player as _update
    from roster.ops.requests import UpdatePlayerRequest

    ctx, _ = make_context(database, dry_run=dry_run)
    request = UpdatePlayerRequest(
        id=player_id,
        name=name,
        market_value=market_value,
        position=position,
        team_id=team_id,
    )
    output_result(_update(ctx, request), as_json=json_out, title="Updated Player")


@app.command("delete")
def delete_player(
    player_id: int = typer.Argument(..., help="Player ID"),
    database: str | None = typer.Option(None, "--database", "-d"),
    dry_run: bool = typer.Option(False, "--dry-run"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Delete a player."""
    from roster.ops.players import delete_player as _delete

    ctx, _ = make_context(database, dry_run=dry_run)
    output_result(_delete(ctx, player_id), as_json=json_out, title="Deleted Player")
