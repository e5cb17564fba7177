"""Unit tests for the generic repository over an in-memory SQLite store."""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from src.jobtracker.core.errors import ConstraintViolation, OwnershipError
from src.jobtracker.entities import (
    ApplicationNote,
    Job,
    JobApplicationStatus,
    JobRepository,
    JobTable,
    JobType,
    PreferencesRepository,
    SalaryRange,
)


class TestAddAndGet:
    def test_added_job_round_trips(self, job_repo, make_job):
        job = make_job()
        added = job_repo.add(job)

        assert added.id is not None
        assert added.created_at is not None
        assert added.updated_at is None
        assert job_repo.get_by_id(added.id) == job.model_copy(update={"id": added.id})

    def test_added_application_round_trips(self, application_repo, make_application, saved_job):
        application = make_application(saved_job.id)
        added = application_repo.add(application)

        fetched = application_repo.get_by_id(added.id)
        assert fetched == application.model_copy(update={"id": added.id})
        assert fetched.created.tzinfo is not None

    def test_added_note_round_trips(self, note_repo, saved_note):
        assert note_repo.get_by_id(saved_note.id) == saved_note

    def test_added_preferences_round_trip(self, preferences_repo, make_preferences):
        preferences = make_preferences()
        added = preferences_repo.add(preferences)

        assert preferences_repo.get_by_id(added.id) == preferences.model_copy(
            update={"id": added.id}
        )

    def test_application_with_offset_timestamp_round_trips(
        self, session, application_repo, make_application, saved_job
    ):
        application = make_application(
            saved_job.id,
            created=datetime(2024, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2))),
            updated=datetime(2024, 1, 1, 9, 0, tzinfo=UTC),
        )
        added = application_repo.add(application)
        session.expire_all()

        fetched = application_repo.get_by_id(added.id)
        assert fetched == application.model_copy(update={"id": added.id})
        assert fetched.created == datetime(2024, 1, 1, 8, 0, tzinfo=UTC)

    def test_preferences_with_cents_round_trip(self, session, preferences_repo, make_preferences):
        preferences = make_preferences(
            salary_range=SalaryRange(min=Decimal("1000.12"), max=Decimal("2000.99"))
        )
        added = preferences_repo.add(preferences)
        session.expire_all()

        fetched = preferences_repo.get_by_id(added.id)
        assert fetched.salary_range == preferences.salary_range

    def test_missing_id_is_absent(self, job_repo):
        assert job_repo.get_by_id(12345) is None

    def test_add_range_assigns_distinct_ids(self, job_repo, make_job):
        added = job_repo.add_range([make_job(title=f"Role {i}") for i in range(3)])

        assert len({job.id for job in added}) == 3
        assert len(job_repo.get_all()) == 3


class TestFind:
    def test_find_returns_matching_subset(self, job_repo, make_job):
        job_repo.add_range(
            [
                make_job(company="Acme", job_type=JobType.REMOTE),
                make_job(company="Acme", job_type=JobType.CONTRACT),
                make_job(company="Globex", job_type=JobType.REMOTE),
            ]
        )

        found = job_repo.find(JobTable.job_type == JobType.REMOTE)
        expected = [job for job in job_repo.get_all() if job.job_type is JobType.REMOTE]

        assert sorted(job.id for job in found) == sorted(job.id for job in expected)

    def test_find_combines_predicates(self, job_repo, make_job):
        job_repo.add_range([make_job(company="Acme"), make_job(company="Globex")])

        found = job_repo.find(JobTable.company == "Acme", JobTable.job_type == JobType.FULL_TIME)
        assert [job.company for job in found] == ["Acme"]

    def test_find_without_matches_is_empty(self, job_repo, saved_job):
        assert job_repo.find(JobTable.company == "Nobody") == []


class TestUpdate:
    def test_update_overwrites_fields_and_stamps_time(self, job_repo, saved_job):
        changed = saved_job.model_copy(update={"title": "Staff Engineer"})
        updated = job_repo.update(changed)

        assert updated.title == "Staff Engineer"
        assert updated.updated_at is not None
        assert updated.created_at == saved_job.created_at
        assert job_repo.get_by_id(saved_job.id).title == "Staff Engineer"

    def test_update_of_missing_row_returns_none(self, job_repo, make_job):
        assert job_repo.update(make_job(id=999)) is None

    def test_update_cannot_change_owner(self, job_repo, saved_job):
        with pytest.raises(OwnershipError):
            job_repo.update(saved_job.model_copy(update={"user_id": uuid4()}))

    def test_application_status_change_is_persisted(self, application_repo, saved_application):
        changed = saved_application.model_copy(update={"status": JobApplicationStatus.FAILED})
        application_repo.update(changed)

        assert application_repo.get_by_id(saved_application.id).status is JobApplicationStatus.FAILED


class TestRemove:
    def test_remove_job_cascades_to_application_and_notes(
        self, job_repo, application_repo, note_repo, saved_job, saved_application, saved_note
    ):
        assert job_repo.remove(saved_job) is True

        assert job_repo.get_by_id(saved_job.id) is None
        assert application_repo.get_by_id(saved_application.id) is None
        assert note_repo.get_by_id(saved_note.id) is None

    def test_remove_range_of_everything_empties_the_table(self, job_repo, make_job):
        job_repo.add_range([make_job(title=f"Role {i}") for i in range(4)])

        removed = job_repo.remove_range(job_repo.get_all())

        assert removed == 4
        assert job_repo.get_all() == []

    def test_remove_missing_row_reports_false(self, job_repo, make_job):
        assert job_repo.remove(make_job(id=999)) is False


class TestConstraints:
    def test_second_application_for_same_job_violates_uniqueness(
        self, application_repo, make_application, saved_application
    ):
        with pytest.raises(ConstraintViolation):
            application_repo.add(make_application(saved_application.job_id))

    def test_application_for_missing_job_violates_foreign_key(
        self, application_repo, make_application
    ):
        with pytest.raises(ConstraintViolation):
            application_repo.add(make_application(job_id=4242))

    def test_note_for_missing_application_violates_foreign_key(self, note_repo, user_id):
        with pytest.raises(ConstraintViolation):
            note_repo.add(ApplicationNote(user_id=user_id, job_application_id=4242, note="x"))


class TestOwnerScope:
    def test_rows_of_other_users_look_absent(self, session, saved_job, other_user_id):
        foreign_repo = JobRepository(session, user_id=other_user_id)

        assert foreign_repo.get_by_id(saved_job.id) is None
        assert foreign_repo.get_all() == []
        assert foreign_repo.remove(saved_job) is False
        assert foreign_repo.update(saved_job) is None

    def test_scoped_repository_sees_own_rows(self, session, saved_job, user_id):
        own_repo = JobRepository(session, user_id=user_id)
        assert [job.id for job in own_repo.get_all()] == [saved_job.id]

    def test_scoped_repository_refuses_foreign_rows(
        self, session, make_preferences, other_user_id
    ):
        repo = PreferencesRepository(session, user_id=other_user_id)
        with pytest.raises(OwnershipError):
            repo.add(make_preferences())

    def test_job_entity_type(self, saved_job):
        assert isinstance(saved_job, Job)
