"""
Root Typer application for the roster CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="roster",
    help="roster — manage coaches, teams and players.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from roster import __version__

        typer.echo(f"roster {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for operation logs"),
) -> None:
    """roster CLI — coaches, teams, players, database and diffs."""
    from roster.core.logging import configure_logging

    configure_logging(level=log_level, json_format=False)


# ── Sub-command registration ─────────────────────────────────────────────

from roster.cli.coaches import app as coaches_app  # noqa: E402
from roster.cli.db import app as db_app  # noqa: E402
from roster.cli.diff import diff as diff_command  # noqa: E402
from roster.cli.players import app as players_app  # noqa: E402
from roster.cli.serve import app as serve_app  # noqa: E402
from roster.cli.teams import app as teams_app  # noqa: E402

app.add_typer(db_app, name="db", help="Database operations.")
app.add_typer(coaches_app, name="coaches", help="Coach management.")
app.add_typer(teams_app, name="teams", help="Team management.")
app.add_typer(players_app, name="players", help="Player management.")
app.add_typer(serve_app, name="serve", help="API server.")
app.command("diff")(diff_command)
