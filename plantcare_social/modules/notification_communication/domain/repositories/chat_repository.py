# 📄 File: plantcare_social/modules/notification_communication/domain/repositories/chat_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists the things any message storage must be able to do.
#
# 🧪 Purpose (Technical Summary):
# Abstract ChatRepository: create, thread, mark_read, touching, unread_counts.
#
# 🔗 Dependencies:
# - abc
# - ChatMessage domain model
#
# 🔄 Connected Modules / Calls From:
# - ConversationService
# - ChatRepositoryImpl

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models.chat import ChatMessage


class ChatRepository(ABC):
    """Contract for the durable chat log."""

    @abstractmethod
    async def create(self, chat: ChatMessage) -> ChatMessage:
        """Persist a new message."""

    @abstractmethod
    async def thread(self, identity: str, peer: str) -> List[ChatMessage]:
        """Every message between the pair, oldest first."""

    @abstractmethod
    async def mark_read(self, sender: str, receiver: str) -> int:
        """Bulk-flag unread messages sender -> receiver as read. Returns rows changed."""

    @abstractmethod
    async def touching(self, identity: str) -> List[ChatMessage]:
        """Every message sent or received by identity, newest first."""

    @abstractmethod
    async def unread_counts(self, receiver: str) -> Dict[str, int]:
        """Unread message count per sender for the receiver."""
