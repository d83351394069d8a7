# 📄 File: plantcare_social/modules/notification_communication/infrastructure/database/notification_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves people's alerts in the database and finds, marks or removes them on request.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of NotificationRepository. Rows are mapped back to the
# tagged domain variant by their stored kind. Batch writes use a single flush.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - notification domain models
#
# 🔄 Connected Modules / Calls From:
# - NotificationFanout (create, create_many)
# - notifications API routes

import logging
from typing import List, Optional, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.notification import NOTIFICATION_TYPES, NotificationBase, NotificationKind
from ...domain.repositories.notification_repository import NotificationRepository
from .models import NotificationModel

logger = logging.getLogger(__name__)


class NotificationRepositoryImpl(NotificationRepository):
    """
    SQLAlchemy implementation of the NotificationRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, notification: NotificationBase) -> NotificationBase:
        self._session.add(self._domain_to_model(notification))
        await self._session.flush()
        return notification

    async def create_many(self, notifications: Sequence[NotificationBase]) -> int:
        if not notifications:
            return 0
        self._session.add_all([self._domain_to_model(n) for n in notifications])
        await self._session.flush()
        logger.debug(f"Stored {len(notifications)} notifications")
        return len(notifications)

    async def list_for(self, recipient: str, limit: int = 50) -> List[NotificationBase]:
        result = await self._session.execute(
            select(NotificationModel)
            .where(NotificationModel.user_id == recipient)
            .order_by(NotificationModel.timestamp.desc())
            .limit(limit)
        )
        return [self._model_to_domain(model) for model in result.scalars()]

    async def count_unread(self, recipient: str) -> int:
        result = await self._session.execute(
            select(func.count())
            .select_from(NotificationModel)
            .where(NotificationModel.user_id == recipient, NotificationModel.read.is_(False))
        )
        return result.scalar_one()

    async def mark_read(self, notification_id: str, recipient: str) -> Optional[NotificationBase]:
        result = await self._session.execute(
            select(NotificationModel).where(
                NotificationModel.notification_id == notification_id,
                NotificationModel.user_id == recipient,
            )
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        model.read = True
        await self._session.flush()
        return self._model_to_domain(model)

    async def mark_all_read(self, recipient: str) -> int:
        result = await self._session.execute(
            update(NotificationModel)
            .where(NotificationModel.user_id == recipient, NotificationModel.read.is_(False))
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def delete(self, notification_id: str, recipient: str) -> bool:
        result = await self._session.execute(
            delete(NotificationModel)
            .where(
                NotificationModel.notification_id == notification_id,
                NotificationModel.user_id == recipient,
            )
            .execution_options(synchronize_session=False)
        )
        return bool(result.rowcount)

    async def delete_all(self, recipient: str) -> int:
        result = await self._session.execute(
            delete(NotificationModel)
            .where(NotificationModel.user_id == recipient)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    def _domain_to_model(self, notification: NotificationBase) -> NotificationModel:
        return NotificationModel(
            notification_id=notification.notification_id,
            user_id=notification.user_id,
            kind=NotificationKind(notification.kind).value,
            title=notification.title,
            body=notification.body,
            related_id=notification.related_id,
            related_email=notification.related_email,
            read=notification.read,
            timestamp=notification.timestamp,
        )

    def _model_to_domain(self, model: NotificationModel) -> NotificationBase:
        notification_cls = NOTIFICATION_TYPES[NotificationKind(model.kind)]
        return notification_cls(
            notification_id=model.notification_id,
            user_id=model.user_id,
            title=model.title,
            body=model.body,
            related_id=model.related_id,
            related_email=model.related_email,
            read=model.read,
            timestamp=model.timestamp,
        )
