"""Entity package: ApplicationNote."""

from .entity import ApplicationNote
from .repository import ApplicationNoteRepository
from .table import ApplicationNoteTable

__all__ = ["ApplicationNote", "ApplicationNoteRepository", "ApplicationNoteTable"]
