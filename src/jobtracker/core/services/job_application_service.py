"""Job application lifecycle for a single user."""

from uuid import UUID

from loguru import logger
from sqlmodel import Session

from src.jobtracker.core.errors import ConflictError, EntityNotFoundError
from src.jobtracker.core.services.validation import build, require_id, require_user_id
from src.jobtracker.entities.job import JobRepository
from src.jobtracker.entities.job_application import (
    JobApplication,
    JobApplicationRepository,
    JobApplicationStatus,
    JobApplicationTable,
)
from src.jobtracker.utils.dates import utcnow


class JobApplicationService:
    def __init__(self, db_session: Session, user_id: UUID):
        self._user_id = require_user_id(user_id)
        self._application_repo = JobApplicationRepository(db_session, user_id=self._user_id)
        self._job_repo = JobRepository(db_session, user_id=self._user_id)

    def create_application(self, job_id: int) -> JobApplication:
        """Record that the user applied to ``job_id``.

        The application starts as APPLIED with ``created == updated``.

        Raises:
            EntityNotFoundError: The job does not exist for this user.
            ConflictError: The job already has an application.
        """
        require_id(job_id, "Job")
        if self._job_repo.get_by_id(job_id) is None:
            raise EntityNotFoundError("Job", job_id)
        if self._application_repo.find(JobApplicationTable.job_id == job_id):
            raise ConflictError(f"Job with ID {job_id} already has an application.")

        now = utcnow()
        application = build(
            JobApplication,
            user_id=self._user_id,
            job_id=job_id,
            status=JobApplicationStatus.APPLIED,
            created=now,
            updated=now,
        )
        created = self._application_repo.add(application)
        logger.info("Created application {} for job {}", created.id, job_id)
        return created

    def update_status(
        self, application_id: int, status: JobApplicationStatus
    ) -> JobApplication:
        """Move an application to ``status``; any status may follow any other."""
        application = self._require_application(application_id)
        changed = build(
            JobApplication,
            **{**application.model_dump(), "status": status, "updated": utcnow()},
        )

        updated = self._application_repo.update(changed)
        if updated is None:
            raise EntityNotFoundError("Job application", application_id)
        logger.info(
            "Application {} moved from {} to {}",
            application_id,
            application.status.name,
            updated.status.name,
        )
        return updated

    def delete_application(self, application_id: int) -> None:
        application = self._require_application(application_id)
        self._application_repo.remove(application)

    def get_application(self, application_id: int) -> JobApplication | None:
        require_id(application_id, "Application")
        return self._application_repo.get_by_id(application_id)

    def list_applications(self) -> list[JobApplication]:
        return self._application_repo.get_all()

    def list_job_applications(self, job_id: int) -> list[JobApplication]:
        require_id(job_id, "Job")
        return self._application_repo.find(JobApplicationTable.job_id == job_id)

    def _require_application(self, application_id: int) -> JobApplication:
        require_id(application_id, "Application")
        application = self._application_repo.get_by_id(application_id)
        if application is None:
            raise EntityNotFoundError("Job application", application_id)
        return application
