"""
Generic repository shared by catalog and per-user tables.

Lookups take column criteria as keyword arguments, e.g.
`repo.find_one(user_id="viewer", movie_id=movie.id)`.
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.orm import Session

from trailerhub.database.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Session-bound access to one mapped table.

    Attributes:
        model: SQLAlchemy model class.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _criteria(self, criteria: dict[str, Any]) -> list[ColumnElement[bool]]:
        return [getattr(self.model, column) == value for column, value in criteria.items()]

    def get_by_id(self, entity_id: UUID) -> ModelT | None:
        """Retrieve a row by primary key."""
        return self._session.get(self.model, entity_id)

    def find_one(self, **criteria: Any) -> ModelT | None:
        """First row whose columns equal the given values, or None."""
        stmt = select(self.model).where(*self._criteria(criteria))
        return self._session.scalars(stmt).first()

    def count(self, **criteria: Any) -> int:
        """Count rows, optionally only those matching the criteria."""
        stmt = select(func.count()).select_from(self.model).where(*self._criteria(criteria))
        return self._session.execute(stmt).scalar() or 0

    def create(self, entity: ModelT) -> ModelT:
        """Add a row and flush so generated keys are populated."""
        self._session.add(entity)
        self._session.flush()
        return entity

    def create_many(self, entities: list[ModelT]) -> list[ModelT]:
        """Add rows in one flush, keeping input order."""
        self._session.add_all(entities)
        self._session.flush()
        return entities

    def delete(self, entity: ModelT) -> None:
        self._session.delete(entity)
        self._session.flush()

    def delete_all(self) -> int:
        """Delete every row of the table.

        Returns:
            Number of deleted rows.
        """
        result = self._session.execute(delete(self.model))
        return result.rowcount or 0
