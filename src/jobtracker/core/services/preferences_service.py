"""Job search preferences, one record per user."""

from decimal import Decimal
from uuid import UUID

from loguru import logger
from sqlmodel import Session

from src.jobtracker.core.errors import ConflictError, EntityNotFoundError, ValidationError
from src.jobtracker.core.services.validation import build, require_id, require_user_id
from src.jobtracker.entities.job import JobType
from src.jobtracker.entities.preferences import (
    Preferences,
    PreferencesRepository,
    SalaryRange,
)


def _salary_range(min_salary: Decimal, max_salary: Decimal) -> SalaryRange:
    if min_salary < 0:
        raise ValidationError("Minimum salary cannot be negative.")
    if max_salary < 0:
        raise ValidationError("Maximum salary cannot be negative.")
    if min_salary > max_salary:
        raise ValidationError("Minimum salary cannot be greater than maximum salary.")
    return build(SalaryRange, min=min_salary, max=max_salary)


class PreferencesService:
    def __init__(self, db_session: Session, user_id: UUID):
        self._user_id = require_user_id(user_id)
        self._preferences_repo = PreferencesRepository(db_session, user_id=self._user_id)

    def create_preferences(
        self,
        min_salary: Decimal,
        max_salary: Decimal,
        job_type: JobType = JobType.NONE,
        need_sponsorship: bool = True,
        need_relocation: bool = True,
    ) -> Preferences:
        """Store the user's preferences.

        Raises:
            ValidationError: The salary range is invalid.
            ConflictError: The user already has preferences.
        """
        salary_range = _salary_range(min_salary, max_salary)
        if self.get_preferences() is not None:
            raise ConflictError("Preferences already exist for this user.")

        preferences = build(
            Preferences,
            user_id=self._user_id,
            salary_range=salary_range,
            job_type=job_type,
            need_sponsorship=need_sponsorship,
            need_relocation=need_relocation,
        )
        created = self._preferences_repo.add(preferences)
        logger.info("Created preferences {} for user {}", created.id, self._user_id)
        return created

    def update_preferences(
        self,
        preferences_id: int,
        min_salary: Decimal,
        max_salary: Decimal,
        job_type: JobType | None = None,
        need_sponsorship: bool | None = None,
        need_relocation: bool | None = None,
    ) -> Preferences:
        """Replace the salary range and apply the other given changes."""
        require_id(preferences_id, "Preferences")
        salary_range = _salary_range(min_salary, max_salary)
        preferences = self._require_preferences(preferences_id)

        changes: dict[str, object] = {"salary_range": salary_range}
        if job_type is not None:
            changes["job_type"] = job_type
        if need_sponsorship is not None:
            changes["need_sponsorship"] = need_sponsorship
        if need_relocation is not None:
            changes["need_relocation"] = need_relocation

        updated = self._preferences_repo.update(
            build(Preferences, **{**preferences.model_dump(), **changes})
        )
        if updated is None:
            raise EntityNotFoundError("Preferences", preferences_id)
        return updated

    def delete_preferences(self, preferences_id: int) -> None:
        self._preferences_repo.remove(self._require_preferences(preferences_id))

    def get_preferences(self) -> Preferences | None:
        found = self._preferences_repo.get_all()
        return found[0] if found else None

    def _require_preferences(self, preferences_id: int) -> Preferences:
        require_id(preferences_id, "Preferences")
        preferences = self._preferences_repo.get_by_id(preferences_id)
        if preferences is None:
            raise EntityNotFoundError("Preferences", preferences_id)
        return preferences
