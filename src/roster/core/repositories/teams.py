"""Team repository."""

from __future__ import annotations

from sqlalchemy import select

from roster.core.orm.tables import TeamTable
from roster.core.repository import CrudRepository


class TeamRepository(CrudRepository[TeamTable]):
    """CRUD for the ``teams`` table."""

    model = TeamTable

    def find_by_coach(self, coach_id: int) -> TeamTable | None:
        """Return the team a coach is bound to, if any."""
        stmt = select(TeamTable).where(TeamTable.coach_id == coach_id)
        return self.session.scalars(stmt).first()
