"""ApplicationNote database table model."""

import sqlalchemy as sa
from sqlmodel import Field

from src.jobtracker.entities._base import EntityTable


class ApplicationNoteTable(EntityTable, table=True):
    """Database persistence model for application notes."""

    __tablename__ = "application_notes"
    __table_args__ = (
        sa.CheckConstraint("length(note) > 0", name="ck_application_notes_note_not_empty"),
    )

    job_application_id: int = Field(
        foreign_key="job_applications.id",
        ondelete="CASCADE",
        index=True,
        nullable=False,
    )
    note: str = Field(sa_type=sa.Text, nullable=False)
