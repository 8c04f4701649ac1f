"""
Roster - CRUD backend for coaches, teams, and players.

Subpackages:
- roster.core: entity model, repositories, logging, errors, map diffing
- roster.ops: operations (service layer) shared by the API and CLI
- roster.api: FastAPI transport
- roster.cli: typer command line
"""

__version__ = "0.1.0"

from roster.core.mapdiff import difference

__all__ = ["difference", "__version__"]
