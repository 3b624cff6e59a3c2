"""
User Domain Entity
Immutable user business object
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..value_objects import Email


@dataclass(frozen=True)
class User:
    """User domain entity - immutable"""

    id: UUID
    email: Email
    name: str
    password_hash: str

    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate user data"""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Name cannot be empty")
        if not self.password_hash:
            raise ValueError("Password hash cannot be empty")

    def __str__(self) -> str:
        return f"User({self.email}, {self.name})"
