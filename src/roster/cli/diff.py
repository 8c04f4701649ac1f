"""
CLI: ``roster diff`` — print the field-level difference of two JSON objects.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from roster.cli.utils import console, fail


def _load(path: Path) -> dict | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        fail("INVALID_INPUT", f"{path}: {e}")
    if data is not None and not isinstance(data, dict):
        fail("INVALID_INPUT", f"{path}: expected a JSON object")
    return data


def diff(
    before: Path = typer.Argument(..., help="JSON object before the change"),
    after: Path = typer.Argument(..., help="JSON object after the change"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Show which keys changed, appeared or disappeared between two JSON objects.

    A file containing ``null`` counts as an empty object.
    """
    from roster.core.mapdiff import difference

    changes = difference(_load(before), _load(after))

    if json_out:
        console.print_json(json.dumps(changes, sort_keys=True))
        return

    if not changes:
        console.print("[dim]No differences.[/dim]")
        return

    for key in sorted(changes):
        console.print(f"  [cyan]{escape(key)}[/cyan]: {escape(changes[key])}", highlight=False)
