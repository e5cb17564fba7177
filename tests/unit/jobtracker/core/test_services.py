"""Unit tests for the domain services."""

from decimal import Decimal
from uuid import UUID

import pytest

from src.jobtracker.core.errors import ConflictError, EntityNotFoundError, ValidationError
from src.jobtracker.core.services import (
    ApplicationNoteService,
    JobApplicationService,
    JobService,
    PreferencesService,
)
from src.jobtracker.entities import JobApplicationStatus, JobType


@pytest.fixture
def job_service(session, user_id) -> JobService:
    return JobService(session, user_id)


@pytest.fixture
def application_service(session, user_id) -> JobApplicationService:
    return JobApplicationService(session, user_id)


@pytest.fixture
def note_service(session, user_id) -> ApplicationNoteService:
    return ApplicationNoteService(session, user_id)


@pytest.fixture
def preferences_service(session, user_id) -> PreferencesService:
    return PreferencesService(session, user_id)


class TestJobService:
    def test_create_trims_text(self, job_service, user_id):
        job = job_service.create_job("  Engineer ", " Acme ", location=" Remote ", job_type=JobType.REMOTE)

        assert job.id is not None
        assert job.user_id == user_id
        assert (job.title, job.company, job.location) == ("Engineer", "Acme", "Remote")
        assert job.description == ""

    @pytest.mark.parametrize(("title", "company"), [("", "Acme"), ("Engineer", "  ")])
    def test_create_requires_title_and_company(self, job_service, title, company):
        with pytest.raises(ValidationError):
            job_service.create_job(title, company)

    def test_empty_user_id_is_rejected(self, session):
        with pytest.raises(ValidationError):
            JobService(session, UUID(int=0))

    def test_update_applies_only_given_fields(self, job_service):
        job = job_service.create_job("Engineer", "Acme", description="Original")

        updated = job_service.update_job(job.id, title="  ", description=" New text ")

        assert updated.title == "Engineer"
        assert updated.description == "New text"
        assert updated.company == "Acme"

    def test_update_missing_job_raises(self, job_service):
        with pytest.raises(EntityNotFoundError, match="Job with ID 99 not found"):
            job_service.update_job(99, title="x")

    def test_non_positive_id_is_rejected(self, job_service):
        with pytest.raises(ValidationError):
            job_service.get_job(0)

    def test_get_missing_job_is_none(self, job_service):
        assert job_service.get_job(99) is None

    def test_delete_then_missing(self, job_service):
        job = job_service.create_job("Engineer", "Acme")
        job_service.delete_job(job.id)

        assert job_service.get_job(job.id) is None
        with pytest.raises(EntityNotFoundError):
            job_service.delete_job(job.id)

    def test_jobs_of_other_users_are_invisible(self, session, job_service, other_user_id):
        job = job_service.create_job("Engineer", "Acme")
        foreign = JobService(session, other_user_id)

        assert foreign.get_job(job.id) is None
        assert foreign.list_jobs() == []
        with pytest.raises(EntityNotFoundError):
            foreign.delete_job(job.id)


class TestJobApplicationService:
    def test_create_starts_as_applied(self, job_service, application_service):
        job = job_service.create_job("Engineer", "Acme")

        application = application_service.create_application(job.id)

        assert application.status is JobApplicationStatus.APPLIED
        assert application.created == application.updated
        assert application_service.list_job_applications(job.id) == [application]

    def test_create_for_missing_job_raises(self, application_service):
        with pytest.raises(EntityNotFoundError):
            application_service.create_application(42)

    def test_second_application_for_job_conflicts(self, job_service, application_service):
        job = job_service.create_job("Engineer", "Acme")
        application_service.create_application(job.id)

        with pytest.raises(ConflictError):
            application_service.create_application(job.id)

    def test_status_can_move_freely(self, job_service, application_service):
        job = job_service.create_job("Engineer", "Acme")
        application = application_service.create_application(job.id)

        failed = application_service.update_status(application.id, JobApplicationStatus.FAILED)
        reopened = application_service.update_status(application.id, JobApplicationStatus.IN_PROCESS)

        assert failed.status is JobApplicationStatus.FAILED
        assert reopened.status is JobApplicationStatus.IN_PROCESS
        assert reopened.updated >= application.updated
        assert reopened.created == application.created

    def test_update_missing_application_raises(self, application_service):
        with pytest.raises(EntityNotFoundError, match="Job application with ID 5 not found"):
            application_service.update_status(5, JobApplicationStatus.FAILED)

    def test_deleting_job_removes_application(self, job_service, application_service):
        job = job_service.create_job("Engineer", "Acme")
        application = application_service.create_application(job.id)

        job_service.delete_job(job.id)

        assert application_service.get_application(application.id) is None
        assert application_service.list_applications() == []


class TestApplicationNoteService:
    @pytest.fixture
    def application(self, job_service, application_service):
        job = job_service.create_job("Engineer", "Acme")
        return application_service.create_application(job.id)

    def test_create_and_list(self, note_service, application):
        note = note_service.create_note(application.id, "  Recruiter call went well. ")

        assert note.note == "Recruiter call went well."
        assert note_service.list_notes(application.id) == [note]

    def test_blank_note_is_rejected(self, note_service, application):
        with pytest.raises(ValidationError):
            note_service.create_note(application.id, "   ")

    def test_note_for_missing_application_raises(self, note_service):
        with pytest.raises(EntityNotFoundError):
            note_service.create_note(77, "text")

    def test_update_and_delete(self, note_service, application):
        note = note_service.create_note(application.id, "first")

        assert note_service.update_note(note.id, "second").note == "second"
        note_service.delete_note(note.id)
        assert note_service.get_note(note.id) is None

    def test_update_missing_note_raises(self, note_service):
        with pytest.raises(EntityNotFoundError):
            note_service.update_note(3, "text")


class TestPreferencesService:
    def test_create_and_get(self, preferences_service):
        created = preferences_service.create_preferences(
            Decimal("50000"), Decimal("80000"), job_type=JobType.CONTRACT, need_sponsorship=False
        )

        assert preferences_service.get_preferences() == created
        assert created.salary_range.min == Decimal("50000")
        assert created.need_sponsorship is False
        assert created.need_relocation is True

    def test_one_record_per_user(self, preferences_service):
        preferences_service.create_preferences(Decimal("1"), Decimal("2"))

        with pytest.raises(ConflictError):
            preferences_service.create_preferences(Decimal("3"), Decimal("4"))

    @pytest.mark.parametrize(
        ("low", "high", "message"),
        [
            ("-1", "10", "Minimum salary cannot be negative"),
            ("1", "-10", "Maximum salary cannot be negative"),
            ("90", "10", "Minimum salary cannot be greater than maximum salary"),
        ],
    )
    def test_invalid_salary_range(self, preferences_service, low, high, message):
        with pytest.raises(ValidationError, match=message):
            preferences_service.create_preferences(Decimal(low), Decimal(high))

    def test_update_replaces_range_and_keeps_unset_flags(self, preferences_service):
        created = preferences_service.create_preferences(
            Decimal("1000"), Decimal("2000"), need_relocation=False
        )

        updated = preferences_service.update_preferences(
            created.id, Decimal("1500"), Decimal("2500"), job_type=JobType.PART_TIME
        )

        assert (updated.salary_range.min, updated.salary_range.max) == (
            Decimal("1500"),
            Decimal("2500"),
        )
        assert updated.job_type is JobType.PART_TIME
        assert updated.need_relocation is False

    def test_delete_missing_preferences_raises(self, preferences_service):
        with pytest.raises(EntityNotFoundError):
            preferences_service.delete_preferences(8)

    def test_no_preferences_is_none(self, preferences_service):
        assert preferences_service.get_preferences() is None
