# 📄 File: plantcare_social/modules/notification_communication/domain/repositories/notification_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for storing and finding people's alerts.
# 🧪 Purpose (Technical Summary):
# Repository interface for notification records. Every mutating lookup is scoped
# to the recipient identity so one user can never touch another's records.
# 🔗 Dependencies:
# Notification domain models, abc
# 🔄 Connected Modules / Calls From:
# Fan-out engine (writes), notifications API (reads, read flags, deletes)

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models.notification import NotificationBase


class NotificationRepository(ABC):

    @abstractmethod
    async def create(self, notification: NotificationBase) -> NotificationBase:
        """Persist one notification."""

    @abstractmethod
    async def create_many(self, notifications: Sequence[NotificationBase]) -> int:
        """Persist a batch in one round trip. Returns the number written."""

    @abstractmethod
    async def list_for(self, recipient: str, limit: int = 50) -> List[NotificationBase]:
        """Latest notifications of the recipient, newest first."""

    @abstractmethod
    async def count_unread(self, recipient: str) -> int:
        """Unread notifications of the recipient."""

    @abstractmethod
    async def mark_read(self, notification_id: str, recipient: str) -> Optional[NotificationBase]:
        """Flag one notification read. None if it does not belong to the recipient."""

    @abstractmethod
    async def mark_all_read(self, recipient: str) -> int:
        """Flag every unread notification of the recipient read."""

    @abstractmethod
    async def delete(self, notification_id: str, recipient: str) -> bool:
        """Delete one notification of the recipient."""

    @abstractmethod
    async def delete_all(self, recipient: str) -> int:
        """Delete every notification of the recipient."""
