"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: Domain model with validation
- table.py: Database persistence model and its mapping to the entity
- repository.py: Named data access capability

Importing this package registers every table on ``SQLModel.metadata``.
"""

from .application_note import ApplicationNote, ApplicationNoteRepository, ApplicationNoteTable
from .job import Job, JobRepository, JobTable, JobType
from .job_application import (
    JobApplication,
    JobApplicationRepository,
    JobApplicationStatus,
    JobApplicationTable,
)
from .preferences import Preferences, PreferencesRepository, PreferencesTable, SalaryRange

__all__ = [
    "ApplicationNote",
    "ApplicationNoteRepository",
    "ApplicationNoteTable",
    "Job",
    "JobRepository",
    "JobTable",
    "JobType",
    "JobApplication",
    "JobApplicationRepository",
    "JobApplicationStatus",
    "JobApplicationTable",
    "Preferences",
    "PreferencesRepository",
    "PreferencesTable",
    "SalaryRange",
]
