"""ApplicationNote repository."""

from src.jobtracker.core.repositories.base import Repository
from src.jobtracker.entities.application_note.entity import ApplicationNote
from src.jobtracker.entities.application_note.table import ApplicationNoteTable


class ApplicationNoteRepository(Repository[ApplicationNote, ApplicationNoteTable]):
    entity_type = ApplicationNote
    table_type = ApplicationNoteTable
