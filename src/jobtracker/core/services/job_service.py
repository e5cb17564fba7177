"""Job management for a single user."""

from uuid import UUID

from loguru import logger
from sqlmodel import Session

from src.jobtracker.core.errors import EntityNotFoundError
from src.jobtracker.core.services.validation import (
    build,
    optional_text,
    require_id,
    require_text,
    require_user_id,
)
from src.jobtracker.entities.job import Job, JobRepository, JobType


class JobService:
    """Create, edit and remove the jobs a user is tracking.

    Changes are staged on ``db_session``; the caller commits.
    """

    def __init__(self, db_session: Session, user_id: UUID):
        self._user_id = require_user_id(user_id)
        self._job_repo = JobRepository(db_session, user_id=self._user_id)

    def create_job(
        self,
        title: str,
        company: str,
        location: str | None = None,
        publication_link: str | None = None,
        job_type: JobType = JobType.NONE,
        description: str | None = None,
        offer_sponsorship: bool = True,
        offer_relocation: bool = True,
    ) -> Job:
        job = build(
            Job,
            user_id=self._user_id,
            title=require_text(title, "Job title cannot be empty."),
            company=require_text(company, "Company name cannot be empty."),
            location=optional_text(location) or "",
            publication_link=optional_text(publication_link) or "",
            job_type=job_type,
            description=optional_text(description) or "",
            offer_sponsorship=offer_sponsorship,
            offer_relocation=offer_relocation,
        )
        created = self._job_repo.add(job)
        logger.info("Created job {} for user {}", created.id, self._user_id)
        return created

    def update_job(
        self,
        job_id: int,
        title: str | None = None,
        company: str | None = None,
        location: str | None = None,
        publication_link: str | None = None,
        job_type: JobType | None = None,
        description: str | None = None,
        offer_sponsorship: bool | None = None,
        offer_relocation: bool | None = None,
    ) -> Job:
        """Apply the given changes; ``None`` leaves a field as it is.

        Blank titles and company names are ignored rather than rejected.
        """
        job = self._require_job(job_id)
        changes: dict[str, object] = {}

        if title is not None and title.strip():
            changes["title"] = title.strip()
        if company is not None and company.strip():
            changes["company"] = company.strip()
        if location is not None:
            changes["location"] = location.strip()
        if publication_link is not None:
            changes["publication_link"] = publication_link.strip()
        if job_type is not None:
            changes["job_type"] = job_type
        if description is not None:
            changes["description"] = description.strip()
        if offer_sponsorship is not None:
            changes["offer_sponsorship"] = offer_sponsorship
        if offer_relocation is not None:
            changes["offer_relocation"] = offer_relocation

        updated = self._job_repo.update(build(Job, **{**job.model_dump(), **changes}))
        if updated is None:
            raise EntityNotFoundError("Job", job_id)
        return updated

    def delete_job(self, job_id: int) -> None:
        """Remove a job together with its application and notes."""
        job = self._require_job(job_id)
        self._job_repo.remove(job)
        logger.info("Deleted job {} for user {}", job_id, self._user_id)

    def get_job(self, job_id: int) -> Job | None:
        require_id(job_id, "Job")
        return self._job_repo.get_by_id(job_id)

    def list_jobs(self) -> list[Job]:
        return self._job_repo.get_all()

    def _require_job(self, job_id: int) -> Job:
        require_id(job_id, "Job")
        job = self._job_repo.get_by_id(job_id)
        if job is None:
            raise EntityNotFoundError("Job", job_id)
        return job
