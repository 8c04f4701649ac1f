"""
CLI layer for roster.

Provides a Typer application with sub-commands that delegate to the
operations layer (``roster.ops``).  This package handles only terminal
transport: argument parsing, coloured output, and table formatting.

Entry point::

    roster --help
"""

from roster.cli.app import app

__all__ = ["app"]
