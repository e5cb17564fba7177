"""JobApplication repository."""

from src.jobtracker.core.repositories.base import Repository
from src.jobtracker.entities.job_application.entity import JobApplication
from src.jobtracker.entities.job_application.table import JobApplicationTable


class JobApplicationRepository(Repository[JobApplication, JobApplicationTable]):
    entity_type = JobApplication
    table_type = JobApplicationTable
