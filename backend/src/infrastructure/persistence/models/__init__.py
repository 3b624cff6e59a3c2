"""ORM Models Package"""

from .user import UserModel
from .job import JobModel

__all__ = [
    "UserModel",
    "JobModel",
]
