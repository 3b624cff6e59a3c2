"""
Job ORM Model
SQLAlchemy model for tracked job applications
"""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func

from core.database import Base
from domain.enums import JobStatus, JobType, DEFAULT_JOB_LOCATION


class JobModel(Base):
    """Job application table ORM model"""

    __tablename__ = "jobs"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Owner
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    company = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=JobStatus.PENDING.value, index=True)
    job_type = Column(String(20), nullable=False, default=JobType.FULL_TIME.value)
    job_location = Column(String(255), nullable=False, default=DEFAULT_JOB_LOCATION)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<JobModel {self.position} at {self.company}>"
