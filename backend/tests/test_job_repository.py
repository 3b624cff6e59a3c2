"""
Tests for the SQLAlchemy repositories against a temporary SQLite database
"""
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from application.repositories.interfaces import JobSearchCriteria
from domain.entities import User
from domain.enums import JobSort, JobStatus, JobType
from domain.value_objects import Email
from infrastructure.persistence.repositories.job import SQLAlchemyJobRepository
from infrastructure.persistence.repositories.user import SQLAlchemyUserRepository


@pytest.fixture
def user_repository(session):
    return SQLAlchemyUserRepository(session)


@pytest.fixture
def job_repository(session):
    return SQLAlchemyJobRepository(session)


@pytest.fixture
async def owner(user_repository):
    return await user_repository.create(
        User(id=uuid4(), email=Email("owner@example.com"), name="Owner", password_hash="$2b$04$hash")
    )


@pytest.fixture
async def other_owner(user_repository):
    return await user_repository.create(
        User(id=uuid4(), email=Email("other@example.com"), name="Other", password_hash="$2b$04$hash")
    )


def at(year, month, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


class TestUserRepository:

    @pytest.mark.asyncio
    async def test_lookup_by_email_and_id(self, user_repository, owner):
        by_email = await user_repository.get_by_email("owner@example.com")
        by_id = await user_repository.get_by_id(owner.id)

        assert by_email.id == owner.id
        assert by_id.name == "Owner"
        assert str(by_id.email) == "owner@example.com"
        assert by_id.created_at is not None

    @pytest.mark.asyncio
    async def test_exists_by_email(self, user_repository, owner):
        assert await user_repository.exists_by_email("owner@example.com") is True
        assert await user_repository.exists_by_email("nobody@example.com") is False

    @pytest.mark.asyncio
    async def test_missing_user(self, user_repository):
        assert await user_repository.get_by_id(uuid4()) is None
        assert await user_repository.get_by_email("nobody@example.com") is None


class TestJobQueries:

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, job_repository, job_factory, owner):
        job = await job_repository.create(job_factory(owner.id))

        assert job.status == JobStatus.PENDING
        assert job.job_type == JobType.FULL_TIME
        assert job.job_location == "my city"
        assert job.updated_at is not None

    @pytest.mark.asyncio
    async def test_find_is_scoped_to_owner(self, job_repository, job_factory, owner, other_owner):
        await job_repository.create(job_factory(owner.id))
        await job_repository.create(job_factory(other_owner.id))

        jobs = await job_repository.find(JobSearchCriteria(owner_id=owner.id))

        assert [j.owner_id for j in jobs] == [owner.id]

    @pytest.mark.asyncio
    async def test_search_status_and_type_filters(self, job_repository, job_factory, owner):
        await job_repository.create(job_factory(owner.id, position="Python Developer", status=JobStatus.INTERVIEW))
        await job_repository.create(job_factory(owner.id, position="python_tester", job_type=JobType.REMOTE))
        await job_repository.create(job_factory(owner.id, position="Designer"))

        search = await job_repository.find(JobSearchCriteria(owner_id=owner.id, search="PYTHON"))
        underscore = await job_repository.find(JobSearchCriteria(owner_id=owner.id, search="n_t"))
        interview = await job_repository.count(JobSearchCriteria(owner_id=owner.id, status="interview"))
        remote = await job_repository.count(JobSearchCriteria(owner_id=owner.id, job_type="remote"))

        assert len(search) == 2
        assert [j.position for j in underscore] == ["python_tester"]
        assert interview == 1
        assert remote == 1

    @pytest.mark.asyncio
    async def test_sort_and_pagination(self, job_repository, job_factory, owner):
        for month, position in [(1, "Bravo"), (3, "Charlie"), (2, "Alpha")]:
            await job_repository.create(job_factory(owner.id, position=position, created_at=at(2026, month)))

        latest = await job_repository.find(JobSearchCriteria(owner_id=owner.id, sort=JobSort.LATEST))
        z_a = await job_repository.find(JobSearchCriteria(owner_id=owner.id, sort=JobSort.Z_A))
        second_page = await job_repository.find(
            JobSearchCriteria(owner_id=owner.id, sort=JobSort.A_Z), offset=1, limit=1
        )

        assert [j.position for j in latest] == ["Charlie", "Alpha", "Bravo"]
        assert [j.position for j in z_a] == ["Charlie", "Bravo", "Alpha"]
        assert [j.position for j in second_page] == ["Bravo"]

    @pytest.mark.asyncio
    async def test_without_sort_key_oldest_come_first(self, job_repository, job_factory, owner):
        for month, position in [(5, "May"), (2, "Feb"), (9, "Sep")]:
            await job_repository.create(job_factory(owner.id, position=position, created_at=at(2026, month)))

        jobs = await job_repository.find(JobSearchCriteria(owner_id=owner.id))

        assert [j.position for j in jobs] == ["Feb", "May", "Sep"]

    @pytest.mark.asyncio
    async def test_pages_are_disjoint_when_timestamps_tie(self, job_repository, job_factory, owner):
        created = [await job_repository.create(job_factory(owner.id)) for _ in range(25)]
        criteria = JobSearchCriteria(owner_id=owner.id)

        pages = [await job_repository.find(criteria, offset=offset, limit=10) for offset in (0, 10, 20)]
        seen = [j.id for page in pages for j in page]

        assert [len(p) for p in pages] == [10, 10, 5]
        assert seen == sorted(j.id for j in created)

    @pytest.mark.asyncio
    async def test_equal_positions_are_ordered_by_id(self, job_repository, job_factory, owner):
        created = [await job_repository.create(job_factory(owner.id, position="Same")) for _ in range(4)]

        jobs = await job_repository.find(JobSearchCriteria(owner_id=owner.id, sort=JobSort.Z_A))

        assert [j.id for j in jobs] == sorted(j.id for j in created)


class TestJobMutations:

    @pytest.mark.asyncio
    async def test_update_owned(self, job_repository, job_factory, owner):
        job = await job_repository.create(job_factory(owner.id))

        updated = await job_repository.update_owned(
            owner.id, job.id, {"company": "Globex", "position": "Lead", "status": "declined"}
        )

        assert updated.company == "Globex"
        assert updated.status == JobStatus.DECLINED
        assert updated.job_type == JobType.FULL_TIME

    @pytest.mark.asyncio
    async def test_update_foreign_job_matches_nothing(self, job_repository, job_factory, owner, other_owner):
        job = await job_repository.create(job_factory(owner.id))

        result = await job_repository.update_owned(
            other_owner.id, job.id, {"company": "Globex", "position": "Lead", "status": "declined"}
        )

        assert result is None
        assert (await job_repository.get_owned(owner.id, job.id)).company == "Acme"

    @pytest.mark.asyncio
    async def test_delete_owned(self, job_repository, job_factory, owner, other_owner):
        job = await job_repository.create(job_factory(owner.id))

        assert await job_repository.delete_owned(other_owner.id, job.id) is False
        assert await job_repository.delete_owned(owner.id, job.id) is True
        assert await job_repository.get_owned(owner.id, job.id) is None


class TestJobAggregates:

    @pytest.mark.asyncio
    async def test_count_by_status(self, job_repository, job_factory, owner, other_owner):
        await job_repository.create(job_factory(owner.id, status=JobStatus.PENDING))
        await job_repository.create(job_factory(owner.id, status=JobStatus.PENDING))
        await job_repository.create(job_factory(owner.id, status=JobStatus.DECLINED))
        await job_repository.create(job_factory(other_owner.id, status=JobStatus.INTERVIEW))

        counts = await job_repository.count_by_status(owner.id)

        assert counts == {"pending": 2, "declined": 1}

    @pytest.mark.asyncio
    async def test_monthly_counts_newest_first_with_limit(self, job_repository, job_factory, owner):
        await job_repository.create(job_factory(owner.id, created_at=at(2025, 12, 3)))
        await job_repository.create(job_factory(owner.id, created_at=at(2026, 2, 3)))
        await job_repository.create(job_factory(owner.id, created_at=at(2026, 2, 20)))
        await job_repository.create(job_factory(owner.id, created_at=at(2026, 1, 9)))

        buckets = await job_repository.monthly_counts(owner.id, limit=2)

        assert buckets == [(2026, 2, 2), (2026, 1, 1)]
