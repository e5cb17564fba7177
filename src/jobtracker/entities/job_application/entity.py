"""Entity: JobApplication."""

from datetime import datetime
from enum import IntEnum
from typing import Self

from pydantic import Field, field_validator, model_validator

from src.jobtracker.entities._base import Entity
from src.jobtracker.utils.dates import ensure_utc, utcnow


class JobApplicationStatus(IntEnum):
    """Where an application stands; stored as its integer value."""

    NOT_APPLIED = 0
    APPLIED = 1
    IN_PROCESS = 2
    WAITING_FEEDBACK = 3
    WAITING_JOB_OFFER = 4
    FAILED = 5


class JobApplication(Entity):
    """The user's application to exactly one job.

    ``created``/``updated`` track the application itself and are distinct
    from the audit timestamps every row carries.
    """

    job_id: int = Field(gt=0, description="Job this application is for")
    status: JobApplicationStatus = Field(
        default=JobApplicationStatus.NOT_APPLIED, description="Current status"
    )
    created: datetime = Field(default_factory=utcnow, description="When the user applied")
    updated: datetime = Field(
        default_factory=utcnow, description="When the status last changed"
    )

    @field_validator("created", "updated")
    @classmethod
    def _application_times_as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> Self:
        if self.updated < self.created:
            raise ValueError("updated must not be earlier than created")
        return self
