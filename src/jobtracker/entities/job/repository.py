"""Job repository."""

from src.jobtracker.core.repositories.base import Repository
from src.jobtracker.entities.job.entity import Job
from src.jobtracker.entities.job.table import JobTable


class JobRepository(Repository[Job, JobTable]):
    entity_type = Job
    table_type = JobTable
