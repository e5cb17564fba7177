"""Application note API router."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from src.jobtracker.api.http.deps import get_application_note_service, get_db_session
from src.jobtracker.api.http.schemas import NoteBody
from src.jobtracker.core.services import ApplicationNoteService
from src.jobtracker.entities import ApplicationNote

router = APIRouter(tags=["notes"])


@router.post(
    "/applications/{application_id}/notes",
    response_model=ApplicationNote,
    status_code=status.HTTP_201_CREATED,
)
def create_note(
    application_id: int,
    body: NoteBody,
    service: ApplicationNoteService = Depends(get_application_note_service),
    session: Session = Depends(get_db_session),
) -> ApplicationNote:
    note = service.create_note(application_id, body.note)
    session.commit()
    return note


@router.get("/applications/{application_id}/notes", response_model=list[ApplicationNote])
def list_notes(
    application_id: int,
    service: ApplicationNoteService = Depends(get_application_note_service),
) -> list[ApplicationNote]:
    return service.list_notes(application_id)


@router.get("/notes/{note_id}", response_model=ApplicationNote)
def get_note(
    note_id: int,
    service: ApplicationNoteService = Depends(get_application_note_service),
) -> ApplicationNote:
    note = service.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Application note not found")
    return note


@router.put("/notes/{note_id}", response_model=ApplicationNote)
def update_note(
    note_id: int,
    body: NoteBody,
    service: ApplicationNoteService = Depends(get_application_note_service),
    session: Session = Depends(get_db_session),
) -> ApplicationNote:
    note = service.update_note(note_id, body.note)
    session.commit()
    return note


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: int,
    service: ApplicationNoteService = Depends(get_application_note_service),
    session: Session = Depends(get_db_session),
) -> Response:
    service.delete_note(note_id)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
