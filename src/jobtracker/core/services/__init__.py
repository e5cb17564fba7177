"""Core services exports."""

from .application_note_service import ApplicationNoteService
from .auth_service import AuthResult, AuthService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .job_application_service import JobApplicationService
from .job_service import JobService
from .preferences_service import PreferencesService

__all__ = [
    "ApplicationNoteService",
    "AuthResult",
    "AuthService",
    "DbManageService",
    "DbSessionService",
    "JobApplicationService",
    "JobService",
    "PreferencesService",
]
