# 📄 File: plantcare_social/modules/notification_communication/infrastructure/database/chat_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves messages and finds conversations and unread messages in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ChatRepository. Thread reads are oldest first,
# conversation scans newest first; unread counts are grouped per sender.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - ChatMessage domain model
#
# 🔄 Connected Modules / Calls From:
# - ConversationService (via chat routes)

import logging
from typing import Dict, List

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.chat import ChatMessage
from ...domain.repositories.chat_repository import ChatRepository
from .models import ChatModel

logger = logging.getLogger(__name__)


class ChatRepositoryImpl(ChatRepository):
    """SQLAlchemy implementation of the chat log."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, chat: ChatMessage) -> ChatMessage:
        model = ChatModel(
            chat_id=chat.chat_id,
            sender_email=chat.sender_email,
            receiver_email=chat.receiver_email,
            message=chat.message,
            timestamp=chat.timestamp,
            read=chat.read,
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug(f"Chat stored: {model.chat_id}")
        return self._model_to_domain(model)

    async def thread(self, identity: str, peer: str) -> List[ChatMessage]:
        stmt = (
            select(ChatModel)
            .where(
                or_(
                    and_(ChatModel.sender_email == identity, ChatModel.receiver_email == peer),
                    and_(ChatModel.sender_email == peer, ChatModel.receiver_email == identity),
                )
            )
            .order_by(ChatModel.timestamp.asc())
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars()]

    async def mark_read(self, sender: str, receiver: str) -> int:
        result = await self._session.execute(
            update(ChatModel)
            .where(
                ChatModel.sender_email == sender,
                ChatModel.receiver_email == receiver,
                ChatModel.read.is_(False),
            )
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def touching(self, identity: str) -> List[ChatMessage]:
        stmt = (
            select(ChatModel)
            .where(or_(ChatModel.sender_email == identity, ChatModel.receiver_email == identity))
            .order_by(ChatModel.timestamp.desc())
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars()]

    async def unread_counts(self, receiver: str) -> Dict[str, int]:
        stmt = (
            select(ChatModel.sender_email, func.count())
            .where(ChatModel.receiver_email == receiver, ChatModel.read.is_(False))
            .group_by(ChatModel.sender_email)
        )
        result = await self._session.execute(stmt)
        return {sender: count for sender, count in result.all()}

    def _model_to_domain(self, model: ChatModel) -> ChatMessage:
        return ChatMessage(
            chat_id=model.chat_id,
            sender_email=model.sender_email,
            receiver_email=model.receiver_email,
            message=model.message,
            timestamp=model.timestamp,
            read=model.read,
        )
