"""Error taxonomy shared by repositories, services and the auth bridge."""

from sqlalchemy.exc import IntegrityError

# Store-level constraint failures (missing foreign key, uniqueness, required
# column) are raised by SQLAlchemy and propagate untouched.
ConstraintViolation = IntegrityError


class JobTrackerError(Exception):
    """Base class for application errors."""


class ValidationError(JobTrackerError, ValueError):
    """Malformed input rejected before any store or network I/O."""


class ConfigurationError(JobTrackerError):
    """A required external endpoint or key is missing at startup."""


class EntityNotFoundError(JobTrackerError, LookupError):
    """A mutation targeted a row that does not exist for the caller."""

    def __init__(self, entity_name: str, entity_id: int | None) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} not found.")


class ConflictError(JobTrackerError):
    """An application-level uniqueness rule was violated."""


class OwnershipError(JobTrackerError, PermissionError):
    """A row owned by one principal was accessed or re-owned by another."""


class ProviderError(JobTrackerError):
    """The identity provider failed or returned something unusable.

    Attributes:
        body: Raw provider response body, kept for diagnostics.
        status_code: HTTP status of the provider response, if one was received.
    """

    def __init__(
        self, message: str, *, body: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class ProviderHTTPError(ProviderError):
    """The provider call itself failed (non-2xx status or transport error)."""


class ProviderResponseError(ProviderError):
    """The provider answered 2xx but the payload could not be parsed."""


__all__ = [
    "ConfigurationError",
    "ConflictError",
    "ConstraintViolation",
    "EntityNotFoundError",
    "JobTrackerError",
    "OwnershipError",
    "ProviderError",
    "ProviderHTTPError",
    "ProviderResponseError",
    "ValidationError",
]
