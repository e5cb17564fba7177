"""Preferences API router; each user has at most one record."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from src.jobtracker.api.http.deps import get_db_session, get_preferences_service
from src.jobtracker.api.http.schemas import PreferencesBody
from src.jobtracker.core.services import PreferencesService
from src.jobtracker.entities import JobType, Preferences

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.post("", response_model=Preferences, status_code=status.HTTP_201_CREATED)
def create_preferences(
    body: PreferencesBody,
    service: PreferencesService = Depends(get_preferences_service),
    session: Session = Depends(get_db_session),
) -> Preferences:
    preferences = service.create_preferences(
        body.min_salary,
        body.max_salary,
        job_type=body.job_type if body.job_type is not None else JobType.NONE,
        need_sponsorship=body.need_sponsorship if body.need_sponsorship is not None else True,
        need_relocation=body.need_relocation if body.need_relocation is not None else True,
    )
    session.commit()
    return preferences


@router.get("", response_model=Preferences)
def get_preferences(
    service: PreferencesService = Depends(get_preferences_service),
) -> Preferences:
    preferences = service.get_preferences()
    if preferences is None:
        raise HTTPException(status_code=404, detail="Preferences not found")
    return preferences


@router.put("/{preferences_id}", response_model=Preferences)
def update_preferences(
    preferences_id: int,
    body: PreferencesBody,
    service: PreferencesService = Depends(get_preferences_service),
    session: Session = Depends(get_db_session),
) -> Preferences:
    preferences = service.update_preferences(
        preferences_id,
        body.min_salary,
        body.max_salary,
        job_type=body.job_type,
        need_sponsorship=body.need_sponsorship,
        need_relocation=body.need_relocation,
    )
    session.commit()
    return preferences


@router.delete("/{preferences_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_preferences(
    preferences_id: int,
    service: PreferencesService = Depends(get_preferences_service),
    session: Session = Depends(get_db_session),
) -> Response:
    service.delete_preferences(preferences_id)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
