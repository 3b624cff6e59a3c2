"""
Domain Enums
Business enumerations for the application
"""
from enum import Enum


class JobStatus(str, Enum):
    """Where an application stands"""
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobType(str, Enum):
    """Employment type of a tracked job"""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    INTERNSHIP = "internship"


class JobSort(str, Enum):
    """Listing order keys accepted by the jobs listing"""
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"

    @classmethod
    def parse(cls, value):
        """Unknown or missing keys mean store order"""
        try:
            return cls(value)
        except ValueError:
            return None


# "all" disables the status / job type filters
FILTER_ALL = "all"

DEFAULT_JOB_LOCATION = "my city"
