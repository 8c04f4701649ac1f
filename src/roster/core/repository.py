"""Generic CRUD repository over a SQLAlchemy session.

Provides :class:`CrudRepository` — a base class that pairs a
``sqlalchemy.orm.Session`` with one mapped table class so that entity
repositories get create/read/update/delete for free.

Architecture::

    ┌──────────────────────────────────────────────────────────┐
    │                   CrudRepository[T]                       │
    │                                                           │
    │   session: Session                                        │
    │   model: type[T]                                          │
    │                                                           │
    │   save(entity)            → T   (insert or update)        │
    │   find_one(id)            → T | None                      │
    │   exists(id)              → bool                          │
    │   find_all(limit, offset) → (list[T], total)              │
    │   count()                 → int                           │
    │   delete(id)              → bool                          │
    └──────────────────────────────────────────────────────────┘

Usage:
    >>> class CoachRepository(CrudRepository[CoachTable]):
    ...     model = CoachTable

Tags:
    repository, database, crud, sqlalchemy
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from roster.core.orm.base import RosterBase

T = TypeVar("T", bound=RosterBase)


class CrudRepository(Generic[T]):
    """Session-backed CRUD for a single mapped table.

    ``save`` follows the "upsert by convention" rule: an entity whose
    identifier is already stored is updated, any other entity is inserted.
    Callers that must not create on update check :meth:`exists` first.

    Parameters:
        session: An open ``Session``.  The repository never commits on its
                 own; call :meth:`commit` once the unit of work is complete.
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: Session) -> None:
        self.session = session

    # -- Writes ------------------------------------------------------------

    def save(self, entity: T) -> T:
        """Insert or update *entity* and return the persistent instance."""
        merged = self.session.merge(entity)
        self.session.flush()
        return merged

    def delete(self, entity_id: int) -> bool:
        """Delete by identifier.  Returns ``True`` if a row was removed."""
        entity = self.find_one(entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.flush()
        return True

    # -- Reads -------------------------------------------------------------

    def find_one(self, entity_id: int) -> T | None:
        """Get by identifier, or ``None``."""
        return self.session.get(self.model, entity_id)

    def exists(self, entity_id: int | None) -> bool:
        if entity_id is None:
            return False
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.session.scalar(stmt) is not None

    def find_all(self, *, limit: int = 50, offset: int = 0) -> tuple[list[T], int]:
        """List entities ordered by id.  Returns ``(rows, total)``."""
        stmt = select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        rows = list(self.session.scalars(stmt))
        return rows, self.count()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model)) or 0

    # -- Transaction -------------------------------------------------------

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
