"""
Job Service Interfaces
Owner-scoped job tracking operations and their result types
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from domain.entities import Job


@dataclass(frozen=True)
class JobFilters:
    """Listing filters as received from the client"""

    search: Optional[str] = None
    status: Optional[str] = None
    job_type: Optional[str] = None
    sort: Optional[str] = None
    page: int = 1


@dataclass(frozen=True)
class JobUpdate:
    """Fields accepted by an update; None job_type/job_location are left as stored"""

    company: Optional[str]
    position: Optional[str]
    status: Optional[str]
    job_type: Optional[str] = None
    job_location: Optional[str] = None


@dataclass(frozen=True)
class JobPage:
    jobs: List[Job]
    total_jobs: int
    num_of_pages: int


@dataclass(frozen=True)
class MonthlyApplications:
    date: str  # e.g. "Oct 2026"
    count: int


@dataclass(frozen=True)
class JobStats:
    # Only statuses with at least one job appear
    default_stats: Dict[str, int] = field(default_factory=dict)
    monthly_applications: List[MonthlyApplications] = field(default_factory=list)


class IJobService(ABC):
    """Job tracking service interface"""

    @abstractmethod
    async def create(self, owner_id: UUID, company: str, position: str) -> Job:
        pass

    @abstractmethod
    async def list(self, owner_id: UUID, filters: JobFilters) -> JobPage:
        pass

    @abstractmethod
    async def stats(self, owner_id: UUID) -> JobStats:
        pass

    @abstractmethod
    async def show(self, owner_id: UUID, job_id: Optional[UUID]) -> Job:
        """A None job_id (unparseable id) never matches an owned record"""
        pass

    @abstractmethod
    async def update(self, owner_id: UUID, job_id: Optional[UUID], fields: JobUpdate) -> Optional[Job]:
        pass

    @abstractmethod
    async def destroy(self, owner_id: UUID, job_id: Optional[UUID]) -> Job:
        pass
