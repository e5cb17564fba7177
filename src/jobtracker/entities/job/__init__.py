"""Entity package: Job."""

from .entity import Job, JobType
from .repository import JobRepository
from .table import JobTable

__all__ = ["Job", "JobType", "JobRepository", "JobTable"]
