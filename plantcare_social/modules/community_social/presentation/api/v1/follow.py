# 📄 File: plantcare_social/modules/community_social/presentation/api/v1/follow.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for following and unfollowing people and for follower counts.
#
# 🧪 Purpose (Technical Summary):
# Follow graph endpoints. Both sides of the edge are written in one request
# session and committed together. A follow schedules a directed update notification.
#
# 🔗 Dependencies:
# - FollowService
# - UserRepositoryImpl
# - NotificationFanout via app state
# - run_detached
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router (mounted under /follow)

"""
Follow graph endpoints.

Identities in the path are emails; FastAPI has already percent-decoded them.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.notification_communication.domain.services.fanout import NotificationFanout
from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from plantcare_social.modules.user_management.presentation.dependencies import get_current_user
from plantcare_social.shared.core.background import run_detached
from plantcare_social.shared.core.dependencies import get_notification_fanout
from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....domain.services.follow_service import FollowService

logger = logging.getLogger(__name__)

follow_router = APIRouter()


def get_follow_service(db: AsyncSession = Depends(get_db_session)) -> FollowService:
    return FollowService(UserRepositoryImpl(db))


def _identity(raw: str) -> str:
    return raw.strip().lower()


@follow_router.post("/follow/{email}", summary="Follow a user")
async def follow_user(
    email: str,
    background_tasks: BackgroundTasks,
    current_user: User = Depends(get_current_user),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db_session),
    fanout: NotificationFanout = Depends(get_notification_fanout),
):
    target = _identity(email)
    following, followers = await service.follow(current_user.email, target)
    await db.commit()

    background_tasks.add_task(run_detached, "follow_notification", fanout.notify_follow, current_user.email, target)
    return {
        "success": True,
        "message": "Successfully followed user",
        "following": following,
        "followers": followers,
    }


@follow_router.post("/unfollow/{email}", summary="Unfollow a user")
async def unfollow_user(
    email: str,
    current_user: User = Depends(get_current_user),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db_session),
):
    following, followers = await service.unfollow(current_user.email, _identity(email))
    await db.commit()
    return {
        "success": True,
        "message": "Successfully unfollowed user",
        "following": following,
        "followers": followers,
    }


@follow_router.get("/status/{email}", summary="Whether the current user follows a user")
async def follow_status(
    email: str,
    current_user: User = Depends(get_current_user),
    service: FollowService = Depends(get_follow_service),
):
    return {"success": True, "isFollowing": await service.status(current_user.email, _identity(email))}


@follow_router.get("/counts/{email}", summary="Following and follower counts")
async def follow_counts(email: str, service: FollowService = Depends(get_follow_service)):
    return {"success": True, **(await service.counts(_identity(email)))}
