"""Entity: ApplicationNote."""

from pydantic import Field, field_validator

from src.jobtracker.entities._base import Entity


class ApplicationNote(Entity):
    """Free-text note attached to a job application."""

    job_application_id: int = Field(gt=0, description="Application the note belongs to")
    note: str = Field(min_length=1, description="Note body")

    @field_validator("note")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("note must not be blank")
        return value
