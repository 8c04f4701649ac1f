"""Entity repositories.

Tags:
    roster, repository

Doc-Types:
    api-reference
"""

from roster.core.repositories.coaches import CoachRepository
from roster.core.repositories.players import PlayerRepository
from roster.core.repositories.teams import TeamRepository

__all__ = ["CoachRepository", "PlayerRepository", "TeamRepository"]
