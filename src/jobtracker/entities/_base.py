"""Shared shape of every persisted entity and of its table mapping."""

from datetime import datetime
from typing import Any, ClassVar, Self, TypeVar
from uuid import UUID

import sqlalchemy as sa
from pydantic import BaseModel, field_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from src.jobtracker.utils.dates import ensure_utc, utcnow


class Entity(BaseModel):
    """Base entity with a store-assigned identifier, an owner and audit timestamps."""

    id: int | None = PydanticField(
        default=None, description="Identifier assigned by the store on insert"
    )
    user_id: UUID = PydanticField(description="Identifier of the owning user")
    created_at: datetime | None = PydanticField(
        default=None, description="Set once when the row is first staged"
    )
    updated_at: datetime | None = PydanticField(
        default=None, description="Set on every update"
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    def __eq__(self, other: Any) -> bool:
        """Compare entities by identity and business attributes, ignoring audit timestamps."""
        if type(other) is not type(self):
            return False

        audit = {"created_at", "updated_at"}
        return self.model_dump(exclude=audit) == other.model_dump(exclude=audit)


TEntity = TypeVar("TEntity", bound=Entity)


class EntityTable(SQLModel, table=False):
    """Persistence columns shared by every table."""

    # Columns the repository never rewrites once a row exists.
    immutable_columns: ClassVar[frozenset[str]] = frozenset(
        {"id", "user_id", "created_at", "updated_at"}
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: UUID = Field(index=True, nullable=False)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=sa.DateTime(timezone=True),
        nullable=False,
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_type=sa.DateTime(timezone=True),
        nullable=True,
    )

    @classmethod
    def from_entity(cls, entity: Entity) -> Self:
        """Build a transient row from a domain entity.

        Identity and audit columns are left to the store and the repository.
        """
        return cls(**entity.model_dump(exclude={"id", "created_at", "updated_at"}))

    def to_entity(self, entity_type: type[TEntity]) -> TEntity:
        return entity_type.model_validate(self, from_attributes=True)

    @classmethod
    def mutable_columns(cls) -> list[str]:
        return [name for name in cls.model_fields if name not in cls.immutable_columns]
