# 📄 File: plantcare_social/modules/notification_communication/presentation/api/v1/notifications.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for reading, marking and clearing your alerts.
#
# 🧪 Purpose (Technical Summary):
# Notification inbox endpoints scoped to the authenticated recipient. Another
# user's notification id behaves like an unknown one (404).
#
# 🔗 Dependencies:
# - NotificationRepositoryImpl
# - get_current_user
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router (mounted under /notifications)

"""
Notification inbox endpoints.

Every lookup is scoped to the authenticated recipient; another user's
notification id behaves exactly like an unknown one (404).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.presentation.dependencies import get_current_user
from plantcare_social.shared.config.settings import get_settings
from plantcare_social.shared.core.exceptions import NotFoundError
from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....infrastructure.database.notification_repository_impl import NotificationRepositoryImpl

logger = logging.getLogger(__name__)

notifications_router = APIRouter()


def get_notification_repository(db: AsyncSession = Depends(get_db_session)) -> NotificationRepositoryImpl:
    return NotificationRepositoryImpl(db)


@notifications_router.get("", summary="Latest notifications, newest first")
async def list_notifications(
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
):
    notifications = await repository.list_for(
        current_user.email, limit=get_settings().NOTIFICATION_LIST_LIMIT
    )
    return {"success": True, "notifications": notifications}


@notifications_router.get("/unread-count", summary="Unread notification count")
async def unread_count(
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
):
    return {"success": True, "count": await repository.count_unread(current_user.email)}


@notifications_router.put("/read-all", summary="Mark every notification read")
async def mark_all_read(
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
    db: AsyncSession = Depends(get_db_session),
):
    updated = await repository.mark_all_read(current_user.email)
    await db.commit()
    return {"success": True, "message": "All notifications marked as read", "updatedCount": updated}


@notifications_router.put("/read/{notification_id}", summary="Mark one notification read")
async def mark_read(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
    db: AsyncSession = Depends(get_db_session),
):
    notification = await repository.mark_read(notification_id, current_user.email)
    if notification is None:
        raise NotFoundError("Notification not found", resource_type="notification", resource_id=notification_id)
    await db.commit()
    return {"success": True, "notification": notification}


@notifications_router.delete("/clear-all", summary="Delete every notification")
async def clear_all(
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
    db: AsyncSession = Depends(get_db_session),
):
    deleted = await repository.delete_all(current_user.email)
    await db.commit()
    return {"success": True, "message": "All notifications cleared", "deletedCount": deleted}


@notifications_router.delete("/{notification_id}", summary="Delete one notification")
async def delete_notification(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    repository: NotificationRepositoryImpl = Depends(get_notification_repository),
    db: AsyncSession = Depends(get_db_session),
):
    if not await repository.delete(notification_id, current_user.email):
        raise NotFoundError("Notification not found", resource_type="notification", resource_id=notification_id)
    await db.commit()
    return {"success": True, "message": "Notification deleted"}
