# 📄 File: plantcare_social/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save and find user information without saying
# which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern and
# dependency inversion principle.
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# Identity verifier, auth service, follow graph service, notification fan-out

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - Reads always hit the store, never a cached copy
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            ConflictError: If a user with the email already exists
        """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (identity)."""

    @abstractmethod
    async def get_many_by_email(self, emails: Iterable[str]) -> Dict[str, User]:
        """Get users keyed by email; unknown emails are absent from the result."""

    @abstractmethod
    async def list_except(self, email: str) -> List[User]:
        """List every user other than the given identity."""

    @abstractmethod
    async def list_emails_except(self, email: str) -> List[str]:
        """Identities of every user other than the given one."""

    @abstractmethod
    async def set_follow_lists(
        self,
        email: str,
        following: Optional[List[str]] = None,
        followers: Optional[List[str]] = None,
    ) -> None:
        """Overwrite one or both follow lists of a user."""
