# 📄 File: plantcare_social/modules/community_social/domain/services/follow_service.py
# 🧭 Purpose (Layman Explanation):
# Keeps track of who follows whom. If Ana follows Ben, Ana's "following" list and
# Ben's "followers" list are always updated together.
# 🧪 Purpose (Technical Summary):
# Follow graph mutator over the redundant per-user edge lists. Both sides of an
# edge are written through the same session, so they commit or roll back as one
# transaction. Lists are re-read from the store on every call.
# 🔗 Dependencies:
# UserRepository, shared exceptions
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/follow.py

import logging
from typing import Dict, List, Tuple

from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.domain.repositories.user_repository import UserRepository
from plantcare_social.shared.core.exceptions import (
    AlreadyFollowingError,
    NotFoundError,
    SelfFollowRejectedError,
)

logger = logging.getLogger(__name__)


class FollowService:

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def _require(self, email: str) -> User:
        user = await self.user_repository.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=email)
        return user

    async def follow(self, follower_email: str, followed_email: str) -> Tuple[List[str], List[str]]:
        """
        Create the edge follower -> followed.

        Returns:
            (follower's following list, followed's followers list)

        Raises:
            SelfFollowRejectedError, NotFoundError, AlreadyFollowingError
        """
        if follower_email == followed_email:
            raise SelfFollowRejectedError(follower_email)

        follower = await self._require(follower_email)
        followed = await self._require(followed_email)

        if follower.is_following(followed.email):
            raise AlreadyFollowingError(follower.email, followed.email)

        following = [*follower.following, followed.email]
        # Repairs a half-written edge instead of duplicating the entry
        followers = followed.followers if follower.email in followed.followers else [*followed.followers, follower.email]

        await self.user_repository.set_follow_lists(follower.email, following=following)
        await self.user_repository.set_follow_lists(followed.email, followers=followers)

        logger.info(f"{follower.email} now follows {followed.email}")
        return following, followers

    async def unfollow(self, follower_email: str, followed_email: str) -> Tuple[List[str], List[str]]:
        """
        Remove the edge from both sides. Removing a missing edge is not an error.

        Raises:
            NotFoundError: Either user does not exist
        """
        follower = await self._require(follower_email)
        followed = await self._require(followed_email)

        following = [email for email in follower.following if email != followed.email]
        followers = [email for email in followed.followers if email != follower.email]

        await self.user_repository.set_follow_lists(follower.email, following=following)
        await self.user_repository.set_follow_lists(followed.email, followers=followers)

        logger.info(f"{follower.email} unfollowed {followed.email}")
        return following, followers

    async def status(self, follower_email: str, followed_email: str) -> bool:
        follower = await self._require(follower_email)
        return follower.is_following(followed_email)

    async def counts(self, email: str) -> Dict[str, int]:
        user = await self._require(email)
        return {
            "followingCount": len(user.following),
            "followersCount": len(user.followers),
        }
