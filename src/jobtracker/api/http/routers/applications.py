"""Job application API router."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from src.jobtracker.api.http.deps import get_db_session, get_job_application_service
from src.jobtracker.api.http.schemas import ApplicationCreate, ApplicationStatusUpdate
from src.jobtracker.core.services import JobApplicationService
from src.jobtracker.entities import JobApplication

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=JobApplication, status_code=status.HTTP_201_CREATED)
def create_application(
    body: ApplicationCreate,
    service: JobApplicationService = Depends(get_job_application_service),
    session: Session = Depends(get_db_session),
) -> JobApplication:
    application = service.create_application(body.job_id)
    session.commit()
    return application


@router.get("", response_model=list[JobApplication])
def list_applications(
    job_id: int | None = None,
    service: JobApplicationService = Depends(get_job_application_service),
) -> list[JobApplication]:
    """List the caller's applications, optionally only those for ``job_id``."""
    if job_id is not None:
        return service.list_job_applications(job_id)
    return service.list_applications()


@router.get("/{application_id}", response_model=JobApplication)
def get_application(
    application_id: int,
    service: JobApplicationService = Depends(get_job_application_service),
) -> JobApplication:
    application = service.get_application(application_id)
    if application is None:
        raise HTTPException(status_code=404, detail="Job application not found")
    return application


@router.patch("/{application_id}/status", response_model=JobApplication)
def update_application_status(
    application_id: int,
    body: ApplicationStatusUpdate,
    service: JobApplicationService = Depends(get_job_application_service),
    session: Session = Depends(get_db_session),
) -> JobApplication:
    application = service.update_status(application_id, body.status)
    session.commit()
    return application


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: int,
    service: JobApplicationService = Depends(get_job_application_service),
    session: Session = Depends(get_db_session),
) -> Response:
    service.delete_application(application_id)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
