"""
Shared fixtures: in-memory repositories for service tests, a temporary
SQLite database for repository and API tests
"""
import os

# Must be set before any application module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from core.database import Base, get_db
from domain.entities import Job, User
from domain.enums import JobSort, JobStatus, JobType
from application.repositories.interfaces import IJobRepository, IUserRepository, JobSearchCriteria
from infrastructure.security.jwt_service import JwtService
from infrastructure.security.password_hasher import BcryptPasswordHasher


class InMemoryUserRepository(IUserRepository):
    def __init__(self):
        self.users: Dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self.users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if str(u.email) == email), None)

    async def create(self, user: User) -> User:
        self.users[user.id] = user
        return user

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None


class InMemoryJobRepository(IJobRepository):
    def __init__(self):
        self.jobs: Dict[UUID, Job] = {}

    async def create(self, job: Job) -> Job:
        self.jobs[job.id] = job
        return job

    def _matching(self, criteria: JobSearchCriteria) -> List[Job]:
        jobs = [j for j in self.jobs.values() if j.owner_id == criteria.owner_id]
        if criteria.search:
            jobs = [j for j in jobs if criteria.search.lower() in j.position.lower()]
        if criteria.status:
            jobs = [j for j in jobs if j.status.value == criteria.status]
        if criteria.job_type:
            jobs = [j for j in jobs if j.job_type.value == criteria.job_type]
        # Stable sorts: id is the tie-breaker, then the requested key
        jobs.sort(key=lambda j: j.id)
        if criteria.sort in (JobSort.A_Z, JobSort.Z_A):
            jobs.sort(key=lambda j: j.position, reverse=criteria.sort == JobSort.Z_A)
        else:
            jobs.sort(key=lambda j: j.created_at, reverse=criteria.sort == JobSort.LATEST)
        return jobs

    async def find(self, criteria: JobSearchCriteria, offset: int = 0, limit: Optional[int] = None) -> List[Job]:
        jobs = self._matching(criteria)[offset:]
        return jobs[:limit] if limit is not None else jobs

    async def count(self, criteria: JobSearchCriteria) -> int:
        return len(self._matching(criteria))

    async def get_owned(self, owner_id: UUID, job_id: UUID) -> Optional[Job]:
        job = self.jobs.get(job_id)
        return job if job and job.owner_id == owner_id else None

    async def update_owned(self, owner_id: UUID, job_id: UUID, changes: Dict[str, Any]) -> Optional[Job]:
        job = await self.get_owned(owner_id, job_id)
        if not job:
            return None
        values = dict(changes)
        values["status"] = JobStatus(values.get("status", job.status))
        values["job_type"] = JobType(values.get("job_type", job.job_type))
        updated = replace(job, **values)
        self.jobs[job_id] = updated
        return updated

    async def delete_owned(self, owner_id: UUID, job_id: UUID) -> bool:
        if await self.get_owned(owner_id, job_id):
            del self.jobs[job_id]
            return True
        return False

    async def count_by_status(self, owner_id: UUID) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for job in self.jobs.values():
            if job.owner_id == owner_id:
                counts[job.status.value] = counts.get(job.status.value, 0) + 1
        return counts

    async def monthly_counts(self, owner_id: UUID, limit: int) -> List[Tuple[int, int, int]]:
        buckets: Dict[Tuple[int, int], int] = {}
        for job in self.jobs.values():
            if job.owner_id == owner_id:
                key = (job.created_at.year, job.created_at.month)
                buckets[key] = buckets.get(key, 0) + 1
        ordered = sorted(buckets.items(), reverse=True)[:limit]
        return [(y, m, c) for (y, m), c in ordered]


def make_job(owner_id: UUID, position: str = "Backend Engineer", **overrides) -> Job:
    values = dict(
        id=uuid4(),
        owner_id=owner_id,
        company="Acme",
        position=position,
        created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return Job(**values)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def job_repo():
    return InMemoryJobRepository()


@pytest.fixture
def job_factory():
    return make_job


@pytest.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_service():
    return JwtService(secret_key="test-secret-key", algorithm="HS256", expire_minutes=60)


@pytest.fixture
async def engine(tmp_path):
    # Register ORM models on Base.metadata
    import infrastructure.persistence.models  # noqa: F401

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
