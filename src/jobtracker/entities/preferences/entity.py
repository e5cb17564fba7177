"""Entity: Preferences."""

from decimal import Decimal
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.jobtracker.entities._base import Entity
from src.jobtracker.entities.job.entity import JobType


class SalaryRange(BaseModel):
    """Immutable salary bounds; stored inline on the preferences row."""

    model_config = ConfigDict(frozen=True)

    min: Decimal = Field(
        ge=0, max_digits=12, decimal_places=2, description="Lowest acceptable salary"
    )
    max: Decimal = Field(
        ge=0, max_digits=12, decimal_places=2, description="Highest expected salary"
    )

    @model_validator(mode="after")
    def _min_not_above_max(self) -> Self:
        if self.min > self.max:
            raise ValueError("Minimum salary cannot be greater than maximum salary.")
        return self


class Preferences(Entity):
    """Job search preferences; a user has at most one record."""

    salary_range: SalaryRange = Field(description="Desired salary bounds")
    job_type: JobType = Field(default=JobType.NONE, description="Desired kind of engagement")
    need_sponsorship: bool = Field(default=True, description="Visa sponsorship needed")
    need_relocation: bool = Field(default=True, description="Relocation support needed")
