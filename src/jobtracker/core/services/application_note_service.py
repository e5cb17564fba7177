"""Notes on job applications."""

from uuid import UUID

from sqlmodel import Session

from src.jobtracker.core.errors import EntityNotFoundError
from src.jobtracker.core.services.validation import (
    build,
    require_id,
    require_text,
    require_user_id,
)
from src.jobtracker.entities.application_note import (
    ApplicationNote,
    ApplicationNoteRepository,
    ApplicationNoteTable,
)
from src.jobtracker.entities.job_application import JobApplicationRepository

_EMPTY_NOTE = "Note text cannot be empty."


class ApplicationNoteService:
    def __init__(self, db_session: Session, user_id: UUID):
        self._user_id = require_user_id(user_id)
        self._note_repo = ApplicationNoteRepository(db_session, user_id=self._user_id)
        self._application_repo = JobApplicationRepository(db_session, user_id=self._user_id)

    def create_note(self, application_id: int, note_text: str) -> ApplicationNote:
        require_id(application_id, "Application")
        text = require_text(note_text, _EMPTY_NOTE)
        if self._application_repo.get_by_id(application_id) is None:
            raise EntityNotFoundError("Job application", application_id)

        note = build(
            ApplicationNote,
            user_id=self._user_id,
            job_application_id=application_id,
            note=text,
        )
        return self._note_repo.add(note)

    def update_note(self, note_id: int, note_text: str) -> ApplicationNote:
        text = require_text(note_text, _EMPTY_NOTE)
        note = self._require_note(note_id)

        updated = self._note_repo.update(build(ApplicationNote, **{**note.model_dump(), "note": text}))
        if updated is None:
            raise EntityNotFoundError("Application note", note_id)
        return updated

    def delete_note(self, note_id: int) -> None:
        self._note_repo.remove(self._require_note(note_id))

    def get_note(self, note_id: int) -> ApplicationNote | None:
        require_id(note_id, "Note")
        return self._note_repo.get_by_id(note_id)

    def list_notes(self, application_id: int) -> list[ApplicationNote]:
        require_id(application_id, "Application")
        return self._note_repo.find(ApplicationNoteTable.job_application_id == application_id)

    def _require_note(self, note_id: int) -> ApplicationNote:
        require_id(note_id, "Note")
        note = self._note_repo.get_by_id(note_id)
        if note is None:
            raise EntityNotFoundError("Application note", note_id)
        return note
