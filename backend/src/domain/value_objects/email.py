"""
Email Value Object
Immutable e-mail address with format validation
"""
import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Email value object with validation"""

    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid email format: {self.value}")

    @staticmethod
    def is_valid(email: str) -> bool:
        return bool(email) and EMAIL_PATTERN.match(email) is not None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value})"
