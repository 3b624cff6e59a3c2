"""
Authentication Service Implementation
Concrete implementation of IAuthService
"""
from datetime import datetime, timezone
from uuid import UUID, uuid4

from loguru import logger

from domain.entities import User
from domain.value_objects import Email
from core.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    FieldError,
    ValidationException,
)
from application.repositories.interfaces import IUserRepository
from application.validation import validate_login, validate_registration
from .interfaces import AuthResult, IAuthService, IJwtService, IPasswordHasher


class AuthService(IAuthService):
    """Authentication service implementation"""

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        jwt_service: IJwtService
    ):
        self.user_repo = user_repository
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service

    async def register(self, email: str, name: str, password: str) -> AuthResult:
        """Register a new user"""

        logger.info(f"Registering new user: {email}")

        errors = validate_registration(email, name, password)

        # Not atomic with the insert below; users.email is unique in the store
        if email and await self.user_repo.exists_by_email(email):
            logger.warning(f"Registration rejected, e-mail already used: {email}")
            raise DuplicateEmailException(email, errors)

        if errors:
            raise ValidationException(errors, "Invalid inputs")

        password_hash = self.password_hasher.hash_password(password)

        user = User(
            id=uuid4(),
            email=Email(email),
            name=name.strip(),
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc)
        )
        created_user = await self.user_repo.create(user)

        logger.info(f"User registered successfully: {email}")

        return self._issue(created_user)

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate user"""

        logger.info(f"Login attempt: {email}")

        errors = validate_login(email, password)
        user = await self.user_repo.get_by_email(email) if email else None
        if email and user is None:
            errors.append(FieldError("email", "You didn't register before"))
        if errors:
            raise ValidationException(errors, "Non-valid inputs")

        if not self.password_hasher.verify_password(password, user.password_hash):
            logger.warning(f"Login failed: Invalid password - {email}")
            raise AuthenticationException("Not authenticated")

        logger.info(f"User logged in successfully: {email}")

        return self._issue(user)

    async def authenticate(self, token: str) -> User:
        """Resolve a bearer token to its user"""
        payload = self.jwt_service.verify_token(token)

        try:
            user_id = UUID(str(payload.get("sub")))
        except ValueError:
            raise AuthenticationException("Invalid or expired token")

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            logger.warning(f"Token subject no longer exists: {user_id}")
            raise AuthenticationException("Invalid or expired token")
        return user

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(
            user_id=user.id,
            name=user.name,
            email=str(user.email),
            token=self.jwt_service.create_access_token(user.id)
        )
