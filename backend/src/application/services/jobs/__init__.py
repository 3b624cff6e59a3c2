"""
Jobs Service Package
"""
from .interfaces import (
    IJobService,
    JobFilters,
    JobPage,
    JobStats,
    JobUpdate,
    MonthlyApplications,
)
from .impl import JobService, ITEMS_PER_PAGE, STATS_MONTHS

__all__ = [
    "IJobService",
    "JobService",
    "JobFilters",
    "JobPage",
    "JobStats",
    "JobUpdate",
    "MonthlyApplications",
    "ITEMS_PER_PAGE",
    "STATS_MONTHS",
]
