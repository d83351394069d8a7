# 📄 File: plantcare_social/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding existing users and updating who follows whom.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository using SQLAlchemy, mapping UserModel rows
# to User domain entities.
#
# 🔗 Dependencies:
# - plantcare_social.modules.user_management.domain (interface and model)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - presentation dependencies (identity verifier, auth routes)
# - community_social follow graph service, notification fan-out

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.shared.core.exceptions import ConflictError

from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from .models import UserModel

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, user: User) -> User:
        user_model = self._domain_to_model(user)
        self._session.add(user_model)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            logger.warning(f"User creation failed - email already exists: {user.email}")
            raise ConflictError(
                "User with this email already exists",
                resource_type="user",
                conflict_field="email",
            )

        logger.info(f"Created user with ID: {user_model.user_id}")
        return self._model_to_domain(user_model)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.user_id == user_id).execution_options(populate_existing=True)
        )
        user_model = result.scalar_one_or_none()
        return self._model_to_domain(user_model) if user_model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(UserModel)
            .where(UserModel.email == email.strip().lower())
            .execution_options(populate_existing=True)
        )
        user_model = result.scalar_one_or_none()
        return self._model_to_domain(user_model) if user_model else None

    async def get_many_by_email(self, emails: Iterable[str]) -> Dict[str, User]:
        wanted = {email for email in emails}
        if not wanted:
            return {}
        result = await self._session.execute(select(UserModel).where(UserModel.email.in_(wanted)))
        return {model.email: self._model_to_domain(model) for model in result.scalars()}

    async def list_except(self, email: str) -> List[User]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email != email).order_by(UserModel.name)
        )
        return [self._model_to_domain(model) for model in result.scalars()]

    async def list_emails_except(self, email: str) -> List[str]:
        result = await self._session.execute(
            select(UserModel.email).where(UserModel.email != email)
        )
        return list(result.scalars())

    async def set_follow_lists(
        self,
        email: str,
        following: Optional[List[str]] = None,
        followers: Optional[List[str]] = None,
    ) -> None:
        values = {}
        if following is not None:
            values["following"] = list(following)
        if followers is not None:
            values["followers"] = list(followers)
        if not values:
            return
        await self._session.execute(
            update(UserModel).where(UserModel.email == email).values(**values)
        )

    def _domain_to_model(self, user: User) -> UserModel:
        return UserModel(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            age=user.age,
            gender=user.gender,
            user_type=user.user_type,
            profile_image_url=user.profile_image_url,
            following=list(user.following),
            followers=list(user.followers),
            created_at=user.created_at,
        )

    def _model_to_domain(self, model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            name=model.name or "",
            email=model.email,
            age=model.age,
            gender=model.gender,
            user_type=model.user_type,
            profile_image_url=model.profile_image_url or "",
            password_hash=model.password_hash,
            following=list(model.following or []),
            followers=list(model.followers or []),
            created_at=model.created_at,
        )
