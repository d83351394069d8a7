# 📄 File: plantcare_social/modules/user_management/domain/services/identity_verifier.py
# 🧭 Purpose (Layman Explanation):
# Checks the login pass a phone or browser shows and finds the matching account.
#
# 🧪 Purpose (Technical Summary):
# Resolves a bearer credential to an existing User. Every failure mode
# (missing, malformed, expired, unknown user) raises AuthenticationError.
#
# 🔗 Dependencies:
# - SecurityManager (python-jose)
# - UserRepository
#
# 🔄 Connected Modules / Calls From:
# - presentation.dependencies.get_current_user
# - api.realtime (register frame)

"""
Identity verifier: bearer credential -> User.

Shared by HTTP requests (Authorization header) and live-channel registration
(credential carried in the register payload).
"""

import logging
from typing import Optional

from plantcare_social.shared.core.exceptions import InvalidCredentialError
from plantcare_social.shared.core.security import SecurityManager, get_security_manager

from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class IdentityVerifier:

    def __init__(
        self,
        user_repository: UserRepository,
        security_manager: Optional[SecurityManager] = None,
    ):
        self.user_repository = user_repository
        self.security = security_manager or get_security_manager()

    async def verify(self, credential: Optional[str]) -> User:
        """
        Resolve a credential to its user.

        Raises:
            AuthenticationError: Missing or empty credential
            InvalidCredentialError: Bad signature, expired, or the user no longer exists
        """
        payload = self.security.verify_token(credential)

        user = await self.user_repository.get_by_id(payload["sub"])
        if user is None:
            logger.warning(f"Credential names a user that no longer exists: {payload['sub']}")
            raise InvalidCredentialError("User no longer exists")

        return user

    @staticmethod
    def strip_scheme(raw: Optional[str]) -> Optional[str]:
        """Accept both 'Bearer <token>' and a bare token."""
        if raw is None:
            return None
        raw = raw.strip()
        if raw.lower().startswith(BEARER_PREFIX):
            return raw[len(BEARER_PREFIX):].strip()
        return raw
