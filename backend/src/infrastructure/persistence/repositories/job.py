"""
Job Repository Implementation
SQLAlchemy-based job repository; every query is scoped by owner
"""
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select, delete, func, extract, and_
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import Job
from domain.enums import JobSort, JobStatus, JobType
from application.repositories.interfaces import IJobRepository, JobSearchCriteria
from infrastructure.persistence.models.job import JobModel
from core.exceptions import RepositoryException


SORT_ORDER = {
    JobSort.LATEST: JobModel.created_at.desc(),
    JobSort.OLDEST: JobModel.created_at.asc(),
    JobSort.A_Z: JobModel.position.asc(),
    JobSort.Z_A: JobModel.position.desc(),
}

# No sort key: insertion order
DEFAULT_ORDER = JobModel.created_at.asc()

UPDATABLE_FIELDS = {"company", "position", "status", "job_type", "job_location"}


class SQLAlchemyJobRepository(IJobRepository):
    """SQLAlchemy implementation of job repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, job: Job) -> Job:
        try:
            model = self._to_model(job)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create job for user {job.owner_id}: {str(e)}")
            raise RepositoryException(f"Failed to create job: {str(e)}")

    async def find(
        self,
        criteria: JobSearchCriteria,
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Job]:
        try:
            stmt = select(JobModel).where(*self._conditions(criteria))
            # id breaks ties so pages never overlap
            stmt = stmt.order_by(
                SORT_ORDER.get(criteria.sort, DEFAULT_ORDER),
                JobModel.id.asc()
            ).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list jobs for user {criteria.owner_id}: {str(e)}")
            raise RepositoryException(f"Failed to list jobs: {str(e)}")

    async def count(self, criteria: JobSearchCriteria) -> int:
        try:
            result = await self.session.execute(
                select(func.count(JobModel.id)).where(*self._conditions(criteria))
            )
            return result.scalar_one()

        except Exception as e:
            logger.error(f"Failed to count jobs for user {criteria.owner_id}: {str(e)}")
            raise RepositoryException(f"Failed to count jobs: {str(e)}")

    async def get_owned(self, owner_id: UUID, job_id: UUID) -> Optional[Job]:
        try:
            model = await self._get_owned_model(owner_id, job_id)
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get job: {str(e)}")

    async def update_owned(
        self,
        owner_id: UUID,
        job_id: UUID,
        changes: Dict[str, Any]
    ) -> Optional[Job]:
        try:
            model = await self._get_owned_model(owner_id, job_id)
            if not model:
                return None

            for name, value in changes.items():
                if name not in UPDATABLE_FIELDS:
                    raise ValueError(f"Field cannot be updated: {name}")
                setattr(model, name, value)

            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to update job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to update job: {str(e)}")

    async def delete_owned(self, owner_id: UUID, job_id: UUID) -> bool:
        try:
            result = await self.session.execute(
                delete(JobModel).where(
                    and_(JobModel.created_by == owner_id, JobModel.id == job_id)
                )
            )
            await self.session.flush()
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to delete job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete job: {str(e)}")

    async def count_by_status(self, owner_id: UUID) -> Dict[str, int]:
        try:
            result = await self.session.execute(
                select(JobModel.status, func.count(JobModel.id))
                .where(JobModel.created_by == owner_id)
                .group_by(JobModel.status)
            )
            return {status: count for status, count in result.all()}

        except Exception as e:
            logger.error(f"Failed to aggregate job statuses for user {owner_id}: {str(e)}")
            raise RepositoryException(f"Failed to aggregate jobs: {str(e)}")

    async def monthly_counts(self, owner_id: UUID, limit: int) -> List[Tuple[int, int, int]]:
        try:
            year = extract("year", JobModel.created_at).label("year")
            month = extract("month", JobModel.created_at).label("month")

            result = await self.session.execute(
                select(year, month, func.count(JobModel.id).label("count"))
                .where(JobModel.created_by == owner_id)
                .group_by(year, month)
                .order_by(year.desc(), month.desc())
                .limit(limit)
            )
            return [(int(y), int(m), int(c)) for y, m, c in result.all()]

        except Exception as e:
            logger.error(f"Failed to aggregate monthly jobs for user {owner_id}: {str(e)}")
            raise RepositoryException(f"Failed to aggregate jobs: {str(e)}")

    async def _get_owned_model(self, owner_id: UUID, job_id: UUID) -> Optional[JobModel]:
        result = await self.session.execute(
            select(JobModel).where(
                and_(JobModel.created_by == owner_id, JobModel.id == job_id)
            )
        )
        return result.scalar_one_or_none()

    def _conditions(self, criteria: JobSearchCriteria) -> list:
        conditions = [JobModel.created_by == criteria.owner_id]
        if criteria.search:
            conditions.append(JobModel.position.icontains(criteria.search, autoescape=True))
        if criteria.status:
            conditions.append(JobModel.status == criteria.status)
        if criteria.job_type:
            conditions.append(JobModel.job_type == criteria.job_type)
        return conditions

    def _to_model(self, job: Job) -> JobModel:
        model = JobModel(
            id=job.id,
            created_by=job.owner_id,
            company=job.company,
            position=job.position,
            status=job.status.value,
            job_type=job.job_type.value,
            job_location=job.job_location
        )
        # Unset timestamps fall back to the server default
        if job.created_at is not None:
            model.created_at = job.created_at
        if job.updated_at is not None:
            model.updated_at = job.updated_at
        return model

    def _to_entity(self, model: JobModel) -> Job:
        return Job(
            id=model.id,
            owner_id=model.created_by,
            company=model.company,
            position=model.position,
            status=JobStatus(model.status),
            job_type=JobType(model.job_type),
            job_location=model.job_location,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
