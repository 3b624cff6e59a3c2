"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""
from dataclasses import dataclass, asdict
from typing import List, Sequence


@dataclass(frozen=True)
class FieldError:
    """Single invalid input field"""

    field: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class AuthenticationException(DomainException):
    """Authentication failed"""
    pass


class NotAuthorizedException(DomainException):
    """Record does not exist or belongs to another user"""
    pass


class ValidationException(DomainException):
    """Data validation failed"""

    def __init__(self, errors: List[FieldError], message: str = "Invalid inputs"):
        self.errors = list(errors)
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        details = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"{self.message} ({details})" if details else self.message


class DuplicateEmailException(ValidationException):
    """E-mail already belongs to a registered user"""

    def __init__(self, email: str, other_errors: Sequence[FieldError] = ()):
        self.email = email
        super().__init__([FieldError("email", "E-mail is already used"), *other_errors])


class CryptoException(DomainException):
    """Stored password hash could not be processed"""
    pass


class RepositoryException(DomainException):
    """Database operation failed"""
    pass
