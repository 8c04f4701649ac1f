"""Coach repository."""

from __future__ import annotations

from roster.core.orm.tables import CoachTable
from roster.core.repository import CrudRepository


class CoachRepository(CrudRepository[CoachTable]):
    """CRUD for the ``coaches`` table."""

    model = CoachTable
