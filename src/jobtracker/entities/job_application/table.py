"""JobApplication database table model."""

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.jobtracker.entities._base import EntityTable


class JobApplicationTable(EntityTable, table=True):
    """Database persistence model for job applications.

    The unique foreign key makes this the dependent side of the one-to-one
    relationship with ``jobs``; deleting the job deletes the application.
    """

    __tablename__ = "job_applications"

    job_id: int = Field(
        foreign_key="jobs.id",
        ondelete="CASCADE",
        unique=True,
        index=True,
        nullable=False,
    )
    status: int = Field(default=0, nullable=False)  # JobApplicationStatus value
    created: datetime = Field(sa_type=sa.DateTime(timezone=True), nullable=False)
    updated: datetime = Field(sa_type=sa.DateTime(timezone=True), nullable=False)
