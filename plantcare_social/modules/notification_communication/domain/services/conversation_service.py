# 📄 File: plantcare_social/modules/notification_communication/domain/services/conversation_service.py
# 🧭 Purpose (Layman Explanation):
# Sends direct messages and builds the list of conversations with unread counts.
#
# 🧪 Purpose (Technical Summary):
# Conversation/unread aggregator. Summaries and unread counts are derived from
# the chat log on every read.
#
# 🔗 Dependencies:
# - ChatRepository
# - UserRepository
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/chat.py

"""
Direct messaging and the conversation/unread aggregator.

Conversation summaries and unread counts are derived from the chat log on
every read; there is no separate live state to keep in sync.
"""

import logging
from typing import Dict, List, Tuple

from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.domain.repositories.user_repository import UserRepository
from plantcare_social.shared.core.exceptions import NotFoundError, ValidationError

from ..models.chat import ChatMessage, ConversationSummary
from ..repositories.chat_repository import ChatRepository

logger = logging.getLogger(__name__)


class ConversationService:

    def __init__(self, chat_repository: ChatRepository, user_repository: UserRepository):
        self.chat_repository = chat_repository
        self.user_repository = user_repository

    async def send(self, sender: User, receiver_email: str, message: str) -> ChatMessage:
        """
        Store a direct message.

        Raises:
            ValidationError: Missing receiver or empty message
            NotFoundError: Receiver is not a registered user
        """
        receiver_email = (receiver_email or "").strip().lower()
        if not receiver_email or not (message or "").strip():
            raise ValidationError("Receiver email and message are required")

        if receiver_email != sender.email and await self.user_repository.get_by_email(receiver_email) is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=receiver_email)

        chat = await self.chat_repository.create(
            ChatMessage(sender_email=sender.email, receiver_email=receiver_email, message=message)
        )
        logger.info(f"Message {chat.chat_id} stored: {sender.email} -> {receiver_email}")
        return chat

    async def open_thread(self, identity: str, peer: str) -> Tuple[List[ChatMessage], int]:
        """
        Messages between the pair, oldest first, and mark the peer's unread
        messages to `identity` as read.

        Returns:
            (messages as they were before marking, number of messages marked read)
        """
        messages = await self.chat_repository.thread(identity, peer)
        marked = await self.chat_repository.mark_read(sender=peer, receiver=identity)
        if marked:
            logger.debug(f"{identity} read {marked} message(s) from {peer}")
        return messages, marked

    async def conversations(self, identity: str) -> List[ConversationSummary]:
        """
        One summary per chat partner, most recent activity first.

        The first occurrence of a partner in the newest-first scan is its latest
        message, so insertion order of the dict is the display order.
        """
        latest: Dict[str, ChatMessage] = {}
        for chat in await self.chat_repository.touching(identity):
            latest.setdefault(chat.partner_of(identity), chat)

        if not latest:
            return []

        unread = await self.chat_repository.unread_counts(identity)
        partners = await self.user_repository.get_many_by_email(latest.keys())

        summaries = []
        for partner_email, chat in latest.items():
            partner = partners.get(partner_email)
            summaries.append(
                ConversationSummary(
                    email=partner_email,
                    name=(partner.name if partner and partner.name else "Unknown"),
                    profile_image_url=(partner.profile_image_url if partner else ""),
                    last_message=chat.message,
                    timestamp=chat.timestamp,
                    unread_count=unread.get(partner_email, 0),
                )
            )
        return summaries
