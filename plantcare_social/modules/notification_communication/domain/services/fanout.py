# 📄 File: plantcare_social/modules/notification_communication/domain/services/fanout.py
# 🧭 Purpose (Layman Explanation):
# When something happens that people should hear about (a message, a new post, a
# like, a new follower) this writes one alert per person and then rings the bell on
# any device they have open. People who are offline still find the alert later.
#
# 🧪 Purpose (Technical Summary):
# Notification fan-out engine. Each operation opens its own transactional session,
# builds one notification per recipient, persists the batch and commits, and only
# then pushes each recipient's own record over the realtime event bus. A failed
# write raises before anything is emitted. Callers schedule these operations after
# their primary write has committed (see shared.core.background.run_detached).
#
# 🔗 Dependencies:
# - DatabaseSessionManager (own transaction per fan-out)
# - RealtimeEventBus (best-effort live delivery)
# - Notification and user repositories
#
# 🔄 Connected Modules / Calls From:
# - chat routes (directed: new message)
# - community_social post routes (broadcast: new post; directed: like)
# - community_social follow routes (directed: new follower)

import logging
from typing import Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.user_management.domain.repositories.user_repository import UserRepository
from plantcare_social.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from plantcare_social.shared.infrastructure.database.session import DatabaseSessionManager
from plantcare_social.shared.realtime.event_bus import NOTIFICATION_EVENT, RealtimeEventBus

from ...infrastructure.database.notification_repository_impl import NotificationRepositoryImpl
from ..models.chat import ChatMessage
from ..models.notification import (
    MessageNotification,
    NotificationBase,
    PostNotification,
    UpdateNotification,
    preview,
)
from ..repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)

NotificationRepositoryFactory = Callable[[AsyncSession], NotificationRepository]
UserRepositoryFactory = Callable[[AsyncSession], UserRepository]


class NotificationFanout:
    """
    Persist-then-push notification delivery.

    Shapes:
    - Directed: exactly one recipient (chat message, like, follow)
    - Broadcast: every identity except the author (new post). This is
      O(registered users) per post and is the documented scaling limit.
    """

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        event_bus: RealtimeEventBus,
        preview_length: int = 50,
        notification_repository_factory: NotificationRepositoryFactory = NotificationRepositoryImpl,
        user_repository_factory: UserRepositoryFactory = UserRepositoryImpl,
    ):
        self._session_manager = session_manager
        self._event_bus = event_bus
        self._preview_length = preview_length
        self._notification_repository_factory = notification_repository_factory
        self._user_repository_factory = user_repository_factory

    async def _display_name(self, users: UserRepository, identity: str) -> str:
        user = await users.get_by_email(identity)
        return user.display_name if user else identity

    async def notify_message(self, chat: ChatMessage) -> Optional[MessageNotification]:
        """
        Directed fan-out for a stored chat message.

        Returns:
            The committed notification, or None for a message to oneself
        """
        if chat.sender_email == chat.receiver_email:
            return None

        async with self._session_manager.get_session() as session:
            users = self._user_repository_factory(session)
            sender_name = await self._display_name(users, chat.sender_email)
            notification = MessageNotification(
                user_id=chat.receiver_email,
                title="New Message",
                body=f"{sender_name}: {preview(chat.message, self._preview_length)}",
                related_id=chat.chat_id,
                related_email=chat.sender_email,
            )
            await self._notification_repository_factory(session).create(notification)

        self._emit(notification)
        return notification

    async def notify_post(self, post_id: str, author_email: str, caption: str) -> List[PostNotification]:
        """
        Broadcast fan-out for a stored post: one record per non-author identity.
        """
        async with self._session_manager.get_session() as session:
            users = self._user_repository_factory(session)
            recipients = await users.list_emails_except(author_email)
            if not recipients:
                return []

            author_name = await self._display_name(users, author_email)
            body = f"{author_name} shared a new post: {preview(caption, self._preview_length)}"
            notifications = [
                PostNotification(
                    user_id=recipient,
                    title="New Post",
                    body=body,
                    related_id=post_id,
                    related_email=author_email,
                )
                for recipient in recipients
            ]
            await self._notification_repository_factory(session).create_many(notifications)

        delivered = self._event_bus.deliver_many(
            ((notification.user_id, notification) for notification in notifications),
            NOTIFICATION_EVENT,
        )
        logger.info(
            f"Post {post_id} fan-out: {len(notifications)} stored, {delivered} pushed live"
        )
        return notifications

    async def notify_like(self, post_id: str, author_email: str, liker_email: str) -> Optional[UpdateNotification]:
        """Directed update to a post's author when someone else likes it."""
        if author_email == liker_email:
            return None
        return await self._notify_update(
            recipient=author_email,
            actor=liker_email,
            title="New Like",
            template="{name} liked your post",
            related_id=post_id,
        )

    async def notify_follow(self, follower_email: str, followed_email: str) -> Optional[UpdateNotification]:
        """Directed update to a user who gained a follower."""
        if follower_email == followed_email:
            return None
        return await self._notify_update(
            recipient=followed_email,
            actor=follower_email,
            title="New Follower",
            template="{name} started following you",
        )

    async def _notify_update(
        self,
        recipient: str,
        actor: str,
        title: str,
        template: str,
        related_id: Optional[str] = None,
    ) -> UpdateNotification:
        async with self._session_manager.get_session() as session:
            users = self._user_repository_factory(session)
            notification = UpdateNotification(
                user_id=recipient,
                title=title,
                body=template.format(name=await self._display_name(users, actor)),
                related_id=related_id,
                related_email=actor,
            )
            await self._notification_repository_factory(session).create(notification)

        self._emit(notification)
        return notification

    def _emit(self, notification: NotificationBase) -> int:
        delivered = self._event_bus.emit_to(notification.user_id, NOTIFICATION_EVENT, notification)
        logger.debug(
            f"Notification {notification.notification_id} for {notification.user_id}: "
            f"{delivered} live connection(s)"
        )
        return delivered
