"""
Dependency Injection Container
Manages service and repository instances
"""
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends

from core.database import get_db
from application.repositories.interfaces import IUserRepository, IJobRepository
from application.services.auth.interfaces import IAuthService, IJwtService, IPasswordHasher
from application.services.jobs import IJobService
from infrastructure.persistence.repositories.user import SQLAlchemyUserRepository
from infrastructure.persistence.repositories.job import SQLAlchemyJobRepository
from infrastructure.security.password_hasher import BcryptPasswordHasher
from infrastructure.security.jwt_service import JwtService


# Singleton instances
_password_hasher: IPasswordHasher | None = None
_jwt_service: IJwtService | None = None


def get_password_hasher() -> IPasswordHasher:
    """Get password hasher instance (singleton)"""
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = BcryptPasswordHasher()
    return _password_hasher


def get_jwt_service() -> IJwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService()
    return _jwt_service


def get_user_repository(
    session: AsyncSession = Depends(get_db)
) -> IUserRepository:
    """Get user repository instance (per-request)"""
    return SQLAlchemyUserRepository(session)


def get_job_repository(
    session: AsyncSession = Depends(get_db)
) -> IJobRepository:
    """Get job repository instance (per-request)"""
    return SQLAlchemyJobRepository(session)


def get_auth_service(
    user_repo: IUserRepository = Depends(get_user_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    jwt_service: IJwtService = Depends(get_jwt_service)
) -> IAuthService:
    """Get auth service instance (per-request)"""
    from application.services.auth.impl import AuthService
    return AuthService(user_repo, password_hasher, jwt_service)


def get_job_service(
    job_repo: IJobRepository = Depends(get_job_repository)
) -> IJobService:
    """Get job service instance (per-request)"""
    from application.services.jobs import JobService
    return JobService(job_repo)
