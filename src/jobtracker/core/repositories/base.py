"""Generic data-access layer shared by every entity."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Generic, TypeVar
from uuid import UUID

from loguru import logger
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select
from sqlmodel.sql.expression import SelectOfScalar

from src.jobtracker.core.errors import OwnershipError
from src.jobtracker.utils.dates import utcnow

if TYPE_CHECKING:
    from src.jobtracker.entities._base import Entity, EntityTable

TEntity = TypeVar("TEntity", bound="Entity")
TTable = TypeVar("TTable", bound="EntityTable")


class Repository(Generic[TEntity, TTable]):
    """CRUD and predicate queries for one entity type.

    The repository only stages changes on the session it is given; the caller
    owns the unit of work and decides when to commit. When constructed with a
    ``user_id`` every read and write is restricted to rows owned by that user,
    and rows owned by anyone else look absent.

    Store errors (foreign key, uniqueness, required columns) surface as
    ``sqlalchemy.exc.IntegrityError`` and are not caught here.
    """

    entity_type: type[TEntity]
    table_type: type[TTable]

    def __init__(self, session: Session, user_id: UUID | None = None) -> None:
        self._session = session
        self._user_id = user_id

    @property
    def user_id(self) -> UUID | None:
        return self._user_id

    def get_by_id(self, entity_id: int) -> TEntity | None:
        row = self._get_row(entity_id)
        if row is None:
            return None
        return row.to_entity(self.entity_type)

    def get_all(self) -> list[TEntity]:
        rows = self._session.exec(self._select()).all()
        return [row.to_entity(self.entity_type) for row in rows]

    def find(self, *predicates: ColumnElement[bool]) -> list[TEntity]:
        """Return entities matching every predicate, filtered by the store.

        Predicates are SQLAlchemy boolean expressions over the entity's table
        columns, e.g. ``JobTable.company == "Acme"`` or
        ``JobTable.job_type.in_([JobType.REMOTE, JobType.CONTRACT])``.
        """
        rows = self._session.exec(self._select(*predicates)).all()
        return [row.to_entity(self.entity_type) for row in rows]

    def add(self, entity: TEntity) -> TEntity:
        """Stage a new row and return it with its store-assigned id."""
        return self.add_range([entity])[0]

    def add_range(self, entities: Iterable[TEntity]) -> list[TEntity]:
        rows: list[TTable] = []
        for entity in entities:
            self._check_owner(entity.user_id)
            rows.append(self.table_type.from_entity(entity))

        self._session.add_all(rows)
        # Flush so the store assigns identities; nothing is durable until commit.
        self._session.flush()
        logger.debug("Staged {} new {} row(s)", len(rows), self.table_type.__tablename__)
        return [row.to_entity(self.entity_type) for row in rows]

    def update(self, entity: TEntity) -> TEntity | None:
        """Overwrite every mutable column of an existing row.

        Returns the refreshed entity, or None when no matching row exists.
        """
        row = self._get_row(entity.id)
        if row is None:
            return None
        if entity.user_id != row.user_id:
            raise OwnershipError(
                f"Owner of {self.entity_type.__name__} {entity.id} cannot be changed"
            )

        values = self.table_type.from_entity(entity)
        for name in self.table_type.mutable_columns():
            setattr(row, name, getattr(values, name))
        row.updated_at = utcnow()

        self._session.add(row)
        self._session.flush()
        logger.debug("Updated {} row {}", self.table_type.__tablename__, row.id)
        return row.to_entity(self.entity_type)

    def remove(self, entity: TEntity) -> bool:
        """Stage deletion of a row; dependent rows go with it via ON DELETE CASCADE."""
        return self.remove_range([entity]) == 1

    def remove_range(self, entities: Iterable[TEntity]) -> int:
        removed = 0
        for entity in entities:
            row = self._get_row(entity.id)
            if row is None:
                continue
            self._session.delete(row)
            removed += 1

        self._session.flush()
        logger.debug("Removed {} {} row(s)", removed, self.table_type.__tablename__)
        return removed

    def _select(self, *predicates: ColumnElement[bool]) -> SelectOfScalar[TTable]:
        statement = select(self.table_type)
        if self._user_id is not None:
            statement = statement.where(self.table_type.user_id == self._user_id)
        if predicates:
            statement = statement.where(*predicates)
        return statement

    def _get_row(self, entity_id: int | None) -> TTable | None:
        if entity_id is None:
            return None
        # Query rather than Session.get so rows removed by a store-side cascade
        # are not served from the identity map.
        return self._session.exec(self._select(self.table_type.id == entity_id)).first()

    def _check_owner(self, user_id: UUID) -> None:
        if self._user_id is not None and user_id != self._user_id:
            raise OwnershipError(
                f"Cannot stage a {self.entity_type.__name__} owned by another user"
            )
