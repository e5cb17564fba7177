"""Entity package: JobApplication."""

from .entity import JobApplication, JobApplicationStatus
from .repository import JobApplicationRepository
from .table import JobApplicationTable

__all__ = [
    "JobApplication",
    "JobApplicationStatus",
    "JobApplicationRepository",
    "JobApplicationTable",
]
