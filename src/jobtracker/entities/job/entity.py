"""Entity: Job."""

from enum import IntEnum

from pydantic import Field, field_validator

from src.jobtracker.entities._base import Entity


class JobType(IntEnum):
    """Kind of engagement a job offers; stored as its integer value."""

    NONE = 0
    FULL_TIME = 1
    PART_TIME = 2
    CONTRACT = 3
    REMOTE = 4


class Job(Entity):
    """A job posting the user is tracking.

    A job has at most one application attached to it.
    """

    title: str = Field(min_length=1, max_length=200, description="Job title")
    company: str = Field(min_length=1, max_length=200, description="Hiring company")
    location: str = Field(default="", max_length=200, description="Job location")
    publication_link: str = Field(
        default="", max_length=500, description="Where the posting was published"
    )
    job_type: JobType = Field(default=JobType.NONE, description="Kind of engagement")
    description: str = Field(default="", description="Full posting text")
    offer_sponsorship: bool = Field(default=True, description="Visa sponsorship offered")
    offer_relocation: bool = Field(default=True, description="Relocation offered")

    @field_validator("title", "company")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
