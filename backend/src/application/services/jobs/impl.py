"""
Job Service Implementation
Create, list, aggregate and mutate the caller's own job applications
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from loguru import logger

from core.exceptions import NotAuthorizedException, ValidationException
from domain.entities import Job
from domain.enums import FILTER_ALL, JobSort, JobStatus
from application.repositories.interfaces import IJobRepository, JobSearchCriteria
from application.validation import validate_job_create, validate_job_update
from .interfaces import (
    IJobService,
    JobFilters,
    JobPage,
    JobStats,
    JobUpdate,
    MonthlyApplications,
)

ITEMS_PER_PAGE = 10
STATS_MONTHS = 6


def month_label(year: int, month: int) -> str:
    """'Oct 2026' style label for a (year, month) bucket"""
    return date(year, month, 1).strftime("%b %Y")


class JobService(IJobService):
    """Job tracking service scoped to the requesting user"""

    def __init__(self, job_repository: IJobRepository):
        self.job_repo = job_repository

    async def create(self, owner_id: UUID, company: str, position: str) -> Job:
        errors = validate_job_create(company, position)
        if errors:
            raise ValidationException(errors, "Non-valid inputs")

        now = datetime.now(timezone.utc)
        job = Job(
            id=uuid4(),
            owner_id=owner_id,
            company=company,
            position=position,
            created_at=now,
            updated_at=now
        )
        created = await self.job_repo.create(job)
        logger.info(f"Job {created.id} created for user {owner_id}")
        return created

    async def list(self, owner_id: UUID, filters: JobFilters) -> JobPage:
        """
        One page of the user's jobs

        num_of_pages is total_jobs // ITEMS_PER_PAGE; a partial last page
        is still served but not counted.
        """
        criteria = JobSearchCriteria(
            owner_id=owner_id,
            search=filters.search or None,
            status=filters.status if filters.status and filters.status != FILTER_ALL else None,
            job_type=filters.job_type if filters.job_type and filters.job_type != FILTER_ALL else None,
            sort=JobSort.parse(filters.sort)
        )
        page = max(filters.page or 1, 1)

        jobs = await self.job_repo.find(
            criteria,
            offset=(page - 1) * ITEMS_PER_PAGE,
            limit=ITEMS_PER_PAGE
        )
        total_jobs = await self.job_repo.count(criteria)

        return JobPage(
            jobs=jobs,
            total_jobs=total_jobs,
            num_of_pages=total_jobs // ITEMS_PER_PAGE
        )

    async def stats(self, owner_id: UUID) -> JobStats:
        by_status = await self.job_repo.count_by_status(owner_id)
        default_stats = {
            status.value: by_status[status.value]
            for status in JobStatus
            if by_status.get(status.value)
        }

        # Store returns newest first; present oldest first
        buckets = await self.job_repo.monthly_counts(owner_id, limit=STATS_MONTHS)
        monthly = [
            MonthlyApplications(date=month_label(year, month), count=count)
            for year, month, count in reversed(buckets)
        ]

        logger.debug(f"Stats for user {owner_id}: {default_stats}")
        return JobStats(default_stats=default_stats, monthly_applications=monthly)

    async def show(self, owner_id: UUID, job_id: Optional[UUID]) -> Job:
        job = await self.job_repo.get_owned(owner_id, job_id) if job_id else None
        if not job:
            logger.warning(f"User {owner_id} denied view of job {job_id}")
            raise NotAuthorizedException("You Are Not Allowed to view this job")
        return job

    async def update(self, owner_id: UUID, job_id: Optional[UUID], fields: JobUpdate) -> Optional[Job]:
        errors = validate_job_update(fields.company, fields.position, fields.status, fields.job_type)
        if errors:
            raise ValidationException(errors, "Non-valid inputs")

        changes: Dict[str, Any] = {
            "company": fields.company,
            "position": fields.position,
            "status": fields.status,
        }
        if fields.job_type is not None:
            changes["job_type"] = fields.job_type
        if fields.job_location is not None:
            changes["job_location"] = fields.job_location

        job = await self.job_repo.update_owned(owner_id, job_id, changes) if job_id else None
        if job is None:
            logger.info(f"Update of job {job_id} by user {owner_id} matched nothing")
        return job

    async def destroy(self, owner_id: UUID, job_id: Optional[UUID]) -> Job:
        job = await self.job_repo.get_owned(owner_id, job_id) if job_id else None
        if not job:
            logger.warning(f"User {owner_id} denied delete of job {job_id}")
            raise NotAuthorizedException("You Are Not Allowed to delete this job")

        await self.job_repo.delete_owned(owner_id, job_id)
        logger.info(f"Job {job_id} deleted by user {owner_id}")
        return job
