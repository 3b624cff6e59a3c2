"""
User Repository Implementation
SQLAlchemy-based user repository
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from domain.entities import User
from domain.value_objects import Email
from application.repositories.interfaces import IUserRepository
from infrastructure.persistence.models.user import UserModel
from core.exceptions import RepositoryException


class SQLAlchemyUserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        try:
            result = await self.session.execute(
                select(UserModel).where(UserModel.id == user_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get user by ID {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get user: {str(e)}")

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        try:
            result = await self.session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            model = result.scalar_one_or_none()

            if model:
                return self._to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {str(e)}")
            raise RepositoryException(f"Failed to get user: {str(e)}")

    async def create(self, user: User) -> User:
        """Create new user"""
        try:
            model = self._to_model(user)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create user {user.email}: {str(e)}")
            raise RepositoryException(f"Failed to create user: {str(e)}")

    async def exists_by_email(self, email: str) -> bool:
        try:
            result = await self.session.execute(
                select(UserModel.id).where(UserModel.email == email)
            )
            return result.scalar_one_or_none() is not None

        except Exception as e:
            logger.error(f"Failed to check user existence {email}: {str(e)}")
            raise RepositoryException(f"Failed to check user existence: {str(e)}")

    def _to_model(self, user: User) -> UserModel:
        model = UserModel(
            id=user.id,
            email=str(user.email),
            password_hash=user.password_hash,
            name=user.name
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        return model

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=Email(model.email),
            name=model.name,
            password_hash=model.password_hash,
            created_at=model.created_at
        )
