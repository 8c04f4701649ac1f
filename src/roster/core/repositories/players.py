"""Player repository."""

from __future__ import annotations

from sqlalchemy import select

from roster.core.orm.tables import PlayerTable
from roster.core.repository import CrudRepository


class PlayerRepository(CrudRepository[PlayerTable]):
    """CRUD for the ``players`` table."""

    model = PlayerTable

    def find_by_team(self, team_id: int) -> list[PlayerTable]:
        stmt = select(PlayerTable).where(PlayerTable.team_id == team_id).order_by(PlayerTable.id)
        return list(self.session.scalars(stmt))
