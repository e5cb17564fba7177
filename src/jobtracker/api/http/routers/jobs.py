"""Job API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from src.jobtracker.api.http.deps import get_db_session, get_job_service
from src.jobtracker.api.http.schemas import JobCreate, JobUpdate
from src.jobtracker.core.services import JobService
from src.jobtracker.entities import Job

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
def create_job(
    body: JobCreate,
    service: JobService = Depends(get_job_service),
    session: Session = Depends(get_db_session),
) -> Job:
    """Start tracking a job."""
    job = service.create_job(**body.model_dump())
    session.commit()
    return job


@router.get("", response_model=list[Job])
def list_jobs(service: JobService = Depends(get_job_service)) -> list[Job]:
    return service.list_jobs()


@router.get("/{job_id}", response_model=Job)
def get_job(job_id: int, service: JobService = Depends(get_job_service)) -> Job:
    job = service.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.put("/{job_id}", response_model=Job)
def update_job(
    job_id: int,
    body: JobUpdate,
    service: JobService = Depends(get_job_service),
    session: Session = Depends(get_db_session),
) -> Job:
    """Update the given fields of a job; omitted fields are left unchanged."""
    job = service.update_job(job_id, **body.model_dump(exclude_unset=True))
    session.commit()
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: int,
    service: JobService = Depends(get_job_service),
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete a job along with its application and notes."""
    service.delete_job(job_id)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
