"""Preferences database table model."""

from decimal import Decimal
from typing import Self

import sqlalchemy as sa
from sqlmodel import Field

from src.jobtracker.entities._base import Entity, EntityTable, TEntity


class PreferencesTable(EntityTable, table=True):
    """Database persistence model for preferences.

    The salary range value object is flattened into two columns.
    """

    __tablename__ = "preferences"
    __table_args__ = (
        sa.CheckConstraint(
            "salary_range_min <= salary_range_max", name="ck_preferences_salary_range"
        ),
    )

    job_type: int = Field(default=0, nullable=False)  # JobType value
    salary_range_min: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    salary_range_max: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    need_sponsorship: bool = Field(default=True, nullable=False)
    need_relocation: bool = Field(default=True, nullable=False)

    @classmethod
    def from_entity(cls, entity: Entity) -> Self:
        data = entity.model_dump(exclude={"id", "created_at", "updated_at", "salary_range"})
        salary_range = entity.salary_range  # type: ignore[attr-defined]
        return cls(
            **data,
            salary_range_min=salary_range.min,
            salary_range_max=salary_range.max,
        )

    def to_entity(self, entity_type: type[TEntity]) -> TEntity:
        data = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name not in ("salary_range_min", "salary_range_max")
        }
        data["salary_range"] = {"min": self.salary_range_min, "max": self.salary_range_max}
        return entity_type.model_validate(data)
