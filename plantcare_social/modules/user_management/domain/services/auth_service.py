# 📄 File: plantcare_social/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up and logging in: checks passwords and hands out the "pass"
# (token) the app shows on every later request.
# 🧪 Purpose (Technical Summary):
# Domain service for registration and password login, issuing JWT access tokens
# through the shared SecurityManager.
# 🔗 Dependencies:
# Domain models, repositories, plantcare_social.shared.core.security
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/auth.py

import logging
from typing import Optional, Tuple

from plantcare_social.shared.core.exceptions import InvalidCredentialError
from plantcare_social.shared.core.security import SecurityManager, get_security_manager

from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """
    Domain service for authentication business logic.

    Business rules:
    - Email is unique (enforced by the repository, 409 on duplicate)
    - Login failures never reveal whether the email exists
    """

    def __init__(
        self,
        user_repository: UserRepository,
        security_manager: Optional[SecurityManager] = None,
    ):
        self.user_repository = user_repository
        self.security = security_manager or get_security_manager()

    def issue_token(self, user: User) -> str:
        return self.security.create_access_token(
            self.security.create_user_token_data(user.user_id, user.email)
        )

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        age: Optional[int] = None,
        gender: Optional[str] = None,
        user_type: Optional[str] = None,
        profile_image_url: str = "",
    ) -> Tuple[User, str]:
        """
        Create a user account and issue its first token.

        Raises:
            ConflictError: If the email is already registered
        """
        user = User(
            name=name,
            email=email,
            age=age,
            gender=gender,
            user_type=user_type,
            profile_image_url=profile_image_url,
            password_hash=self.security.get_password_hash(password),
        )
        created = await self.user_repository.create(user)
        logger.info(f"User registered: {created.email}")
        return created, self.issue_token(created)

    async def authenticate_user(self, email: str, password: str) -> Tuple[User, str]:
        """
        Authenticate user with email and password.

        Raises:
            InvalidCredentialError: Unknown email or wrong password
        """
        user = await self.user_repository.get_by_email(email)
        if user is None or not self.security.verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise InvalidCredentialError("Invalid email or password")

        logger.info(f"User logged in: {user.email}")
        return user, self.issue_token(user)
