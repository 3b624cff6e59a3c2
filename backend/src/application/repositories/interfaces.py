"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from domain.entities import User, Job
from domain.enums import JobSort


class IUserRepository(ABC):
    """User repository interface"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create new user"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if user exists by email"""
        pass


@dataclass(frozen=True)
class JobSearchCriteria:
    """Owner-scoped job lookup; None means no filter"""

    owner_id: UUID
    search: Optional[str] = None
    status: Optional[str] = None
    job_type: Optional[str] = None
    sort: Optional[JobSort] = None


class IJobRepository(ABC):
    """Job repository interface

    Every lookup and mutation is keyed by the owning user.
    """

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Persist a new job"""
        pass

    @abstractmethod
    async def find(
        self,
        criteria: JobSearchCriteria,
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Job]:
        """Matching jobs in the requested order"""
        pass

    @abstractmethod
    async def count(self, criteria: JobSearchCriteria) -> int:
        """Number of matching jobs"""
        pass

    @abstractmethod
    async def get_owned(self, owner_id: UUID, job_id: UUID) -> Optional[Job]:
        """Get job by ID if it belongs to owner_id"""
        pass

    @abstractmethod
    async def update_owned(
        self,
        owner_id: UUID,
        job_id: UUID,
        changes: Dict[str, Any]
    ) -> Optional[Job]:
        """Apply changes to an owned job; None when nothing matched"""
        pass

    @abstractmethod
    async def delete_owned(self, owner_id: UUID, job_id: UUID) -> bool:
        """Delete an owned job; False when nothing matched"""
        pass

    @abstractmethod
    async def count_by_status(self, owner_id: UUID) -> Dict[str, int]:
        """Job counts keyed by status value, present statuses only"""
        pass

    @abstractmethod
    async def monthly_counts(self, owner_id: UUID, limit: int) -> List[Tuple[int, int, int]]:
        """
        (year, month, count) of job creation, newest month first

        Args:
            owner_id: Owning user
            limit: Maximum number of months returned
        """
        pass
