"""
Authentication Service Interfaces
Abstract base classes for authentication services
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID

from domain.entities import User


@dataclass(frozen=True)
class AuthResult:
    """Identity handed back after register/login"""

    user_id: UUID
    name: str
    email: str
    token: str


class IPasswordHasher(ABC):
    """Password hashing interface"""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a plain password"""
        pass

    @abstractmethod
    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify password against hash"""
        pass


class IJwtService(ABC):
    """JWT token service interface"""

    @abstractmethod
    def create_access_token(self, user_id: UUID) -> str:
        """Create access token"""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> dict:
        """Verify and decode token"""
        pass


class IAuthService(ABC):
    """Authentication service interface"""

    @abstractmethod
    async def register(self, email: str, name: str, password: str) -> AuthResult:
        """
        Register a new user

        Raises:
            DuplicateEmailException: email already registered
            ValidationException: one or more fields invalid
        """
        pass

    @abstractmethod
    async def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate user

        Raises:
            ValidationException: missing fields or unknown email
            AuthenticationException: wrong password
        """
        pass

    @abstractmethod
    async def authenticate(self, token: str) -> User:
        """Resolve a bearer token to its user"""
        pass
