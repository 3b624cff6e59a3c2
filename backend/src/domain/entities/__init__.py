"""Domain Entities - Core business objects"""

from .user import User
from .job import Job
__all__ = ["User", "Job"]
