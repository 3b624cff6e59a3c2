"""
Job Schemas
Pydantic schemas for the job tracking API
"""
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities import Job
from application.services.jobs import JobPage, JobStats, JobUpdate


class JobCreateRequest(BaseModel):
    company: str = ""
    position: str = ""


class JobUpdateRequest(BaseModel):
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[str] = None
    job_type: Optional[str] = None
    job_location: Optional[str] = None

    def to_update(self) -> JobUpdate:
        return JobUpdate(
            company=self.company,
            position=self.position,
            status=self.status,
            job_type=self.job_type,
            job_location=self.job_location
        )


class JobResponse(BaseModel):
    """Response schema for a single job"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "company": "Tech Corp",
                "position": "Backend Engineer",
                "status": "interview",
                "job_type": "full-time",
                "job_location": "Berlin",
                "created_by": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "created_at": "2026-10-19T09:30:00Z",
                "updated_at": "2026-10-19T09:30:00Z"
            }
        }
    )

    id: UUID
    company: str
    position: str
    status: str
    job_type: str
    job_location: str
    created_by: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            company=job.company,
            position=job.position,
            status=job.status.value,
            job_type=job.job_type.value,
            job_location=job.job_location,
            created_by=job.owner_id,
            created_at=job.created_at,
            updated_at=job.updated_at
        )


class JobEnvelope(BaseModel):
    job: Optional[JobResponse] = None

    @classmethod
    def of(cls, job: Optional[Job]) -> "JobEnvelope":
        return cls(job=JobResponse.from_entity(job) if job else None)


class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    total_jobs: int
    num_of_pages: int

    @classmethod
    def from_page(cls, page: JobPage) -> "JobListResponse":
        return cls(
            jobs=[JobResponse.from_entity(j) for j in page.jobs],
            total_jobs=page.total_jobs,
            num_of_pages=page.num_of_pages
        )


class MonthlyApplicationResponse(BaseModel):
    date: str
    count: int


class JobStatsResponse(BaseModel):
    default_stats: Dict[str, int]
    monthly_applications: List[MonthlyApplicationResponse]

    @classmethod
    def from_stats(cls, stats: JobStats) -> "JobStatsResponse":
        return cls(
            default_stats=stats.default_stats,
            monthly_applications=[
                MonthlyApplicationResponse(date=m.date, count=m.count)
                for m in stats.monthly_applications
            ]
        )
