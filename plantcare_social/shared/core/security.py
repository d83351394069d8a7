"""
Security utilities for JWT issuance/validation and password hashing.
Provides the credential contract the identity verifier builds on.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from ..config.settings import get_settings
from .exceptions import AuthenticationError, InvalidCredentialError

logger = logging.getLogger(__name__)


class SecurityManager:
    """
    Centralized security manager for credentials.
    Handles JWT tokens and password hashing.
    """

    def __init__(self):
        self.settings = get_settings()
        self.algorithm = self.settings.JWT_ALGORITHM
        self.secret_key = self.settings.JWT_SECRET_KEY
        self.access_token_expire_minutes = self.settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.settings.BCRYPT_ROUNDS,
        )

    def create_access_token(
        self,
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT access token with user data and expiration.

        Args:
            data: Token payload data, must include "sub"
            expires_delta: Custom expiration time

        Returns:
            str: Encoded JWT token
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        to_encode.update({
            "exp": expire,
            "iat": now,
            "type": "access"
        })

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user: {data.get('sub')}")
        return encoded_jwt

    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Verify and decode a JWT access token.

        Args:
            token: JWT token to verify

        Returns:
            dict: Decoded token payload

        Raises:
            AuthenticationError: If no token was supplied
            InvalidCredentialError: If the token is invalid, expired or malformed
        """
        if not token or not token.strip():
            raise AuthenticationError("No authentication token provided")

        try:
            payload = jwt.decode(token.strip(), self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.warning("Token has expired")
            raise InvalidCredentialError("Token expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise InvalidCredentialError()

        if payload.get("type") != "access":
            logger.warning(f"Token type mismatch. Got: {payload.get('type')}")
            raise InvalidCredentialError()

        if not payload.get("sub"):
            logger.warning("Token missing subject (user_id)")
            raise InvalidCredentialError()

        return payload

    def get_password_hash(self, password: str) -> str:
        """Hash password using bcrypt."""
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            plain_password: Plain text password
            hashed_password: Stored hashed password

        Returns:
            bool: True if password matches
        """
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification error: {e}")
            return False

    def create_user_token_data(self, user_id: str, email: str) -> Dict[str, Any]:
        """Create token payload data for user."""
        return {
            "sub": user_id,
            "email": email,
        }


@lru_cache()
def get_security_manager() -> SecurityManager:
    """
    Get cached security manager instance.

    Returns:
        SecurityManager: Singleton security manager
    """
    return SecurityManager()
