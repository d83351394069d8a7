# 📄 File: plantcare_social/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# The "door check" used by every protected endpoint: reads the pass the app sends
# and works out which user is knocking.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies wiring the Authorization header through HTTPBearer into the
# IdentityVerifier, and factories for module repositories bound to the request session.
# 🔗 Dependencies:
# FastAPI security, SQLAlchemy session, identity verifier, logging context
# 🔄 Connected Modules / Calls From:
# Every authenticated router (auth, chat, follow, posts, notifications, plants)

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.shared.core.exceptions import AuthenticationError
from plantcare_social.shared.infrastructure.database.session import get_db_session
from plantcare_social.shared.utils.logging import bind_user

from ..domain.models.user import User
from ..domain.services.identity_verifier import IdentityVerifier
from ..infrastructure.database.user_repository_impl import UserRepositoryImpl

logger = logging.getLogger(__name__)

# auto_error=False so a missing header maps to our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repository(db: AsyncSession = Depends(get_db_session)) -> UserRepositoryImpl:
    return UserRepositoryImpl(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_repository: UserRepositoryImpl = Depends(get_user_repository),
) -> User:
    """
    Resolve the bearer credential to the acting user.

    Raises:
        AuthenticationError: No bearer credential on the request
        InvalidCredentialError: Credential rejected by the verifier
    """
    if credentials is None:
        raise AuthenticationError("Authorization header missing or malformed")

    user = await IdentityVerifier(user_repository).verify(credentials.credentials)
    bind_user(user.email)
    return user
