"""Job database table model."""

import sqlalchemy as sa
from sqlmodel import Field

from src.jobtracker.entities._base import EntityTable


class JobTable(EntityTable, table=True):
    """Database persistence model for jobs."""

    __tablename__ = "jobs"

    title: str = Field(max_length=200, nullable=False)
    company: str = Field(max_length=200, nullable=False)
    location: str = Field(default="", max_length=200, nullable=False)
    publication_link: str = Field(default="", max_length=500, nullable=False)
    job_type: int = Field(default=0, nullable=False)  # JobType value
    description: str = Field(default="", sa_type=sa.Text, nullable=False)
    offer_sponsorship: bool = Field(default=True, nullable=False)
    offer_relocation: bool = Field(default=True, nullable=False)
