"""
Job Domain Entity
Immutable tracked job application owned by one user
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..enums import JobStatus, JobType, DEFAULT_JOB_LOCATION


@dataclass(frozen=True)
class Job:
    """Job application domain entity - immutable"""

    id: UUID
    owner_id: UUID
    company: str
    position: str

    status: JobStatus = JobStatus.PENDING
    job_type: JobType = JobType.FULL_TIME
    job_location: str = DEFAULT_JOB_LOCATION

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data"""
        if not self.company or len(self.company.strip()) == 0:
            raise ValueError("Company name cannot be empty")

        if not self.position or len(self.position.strip()) == 0:
            raise ValueError("Position cannot be empty")

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.owner_id == user_id

    def __str__(self) -> str:
        return f"Job({self.position} at {self.company})"
