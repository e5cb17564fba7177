"""Request bodies accepted by the HTTP API.

Responses reuse the domain entities directly.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.jobtracker.entities import JobApplicationStatus, JobType


class JobCreate(BaseModel):
    title: str
    company: str
    location: str | None = None
    publication_link: str | None = None
    job_type: JobType = JobType.NONE
    description: str | None = None
    offer_sponsorship: bool = True
    offer_relocation: bool = True


class JobUpdate(BaseModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    publication_link: str | None = None
    job_type: JobType | None = None
    description: str | None = None
    offer_sponsorship: bool | None = None
    offer_relocation: bool | None = None


class ApplicationCreate(BaseModel):
    job_id: int


class ApplicationStatusUpdate(BaseModel):
    status: JobApplicationStatus


class NoteBody(BaseModel):
    note: str


class PreferencesBody(BaseModel):
    min_salary: Decimal
    max_salary: Decimal
    job_type: JobType | None = None
    need_sponsorship: bool | None = None
    need_relocation: bool | None = None


class RegisterRequest(BaseModel):
    email: str
    password: str
    full_name: str | None = Field(default=None, max_length=200)


class LoginRequest(BaseModel):
    email: str
    password: str
