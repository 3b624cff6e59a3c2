"""
Job Tracking Endpoints
/api/v1/jobs/* routes, all scoped to the authenticated user
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from domain.entities import User
from presentation.api.v1.dependencies import get_current_user
from presentation.api.v1.container import get_job_service
from presentation.api.v1.schemas.job import (
    JobCreateRequest,
    JobEnvelope,
    JobListResponse,
    JobStatsResponse,
    JobUpdateRequest,
)
from application.services.jobs import IJobService, JobFilters


router = APIRouter()


def parse_job_id(raw: str) -> Optional[UUID]:
    """Malformed ids are treated like ids of someone else's job"""
    try:
        return UUID(raw)
    except ValueError:
        return None


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: JobCreateRequest,
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    job = await job_service.create(user.id, request.company, request.position)
    return JobEnvelope.of(job)


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: Optional[str] = Query(None, description="Case-insensitive match on position"),
    status: Optional[str] = Query(None, description="pending, interview, declined or all"),
    job_type: Optional[str] = Query(None, description="full-time, part-time, remote, internship or all"),
    sort: Optional[str] = Query(None, description="latest, oldest, a-z or z-a"),
    page: int = Query(1, ge=1),
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    """One page (10 jobs) of the caller's applications"""
    filters = JobFilters(search=search, status=status, job_type=job_type, sort=sort, page=page)
    result = await job_service.list(user.id, filters)
    return JobListResponse.from_page(result)


@router.get("/stats", response_model=JobStatsResponse)
async def job_stats(
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    """Counts per status and per month (last 6 months with data)"""
    stats = await job_service.stats(user.id)
    return JobStatsResponse.from_stats(stats)


@router.get("/{job_id}", response_model=JobEnvelope)
async def show_job(
    job_id: str,
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    job = await job_service.show(user.id, parse_job_id(job_id))
    return JobEnvelope.of(job)


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: str,
    request: JobUpdateRequest,
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    """Returns {"job": null} when the id does not match one of the caller's jobs"""
    job = await job_service.update(user.id, parse_job_id(job_id), request.to_update())
    return JobEnvelope.of(job)


@router.delete("/{job_id}", response_model=JobEnvelope)
async def delete_job(
    job_id: str,
    user: User = Depends(get_current_user),
    job_service: IJobService = Depends(get_job_service)
):
    job = await job_service.destroy(user.id, parse_job_id(job_id))
    return JobEnvelope.of(job)
