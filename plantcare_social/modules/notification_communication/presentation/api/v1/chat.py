# 📄 File: plantcare_social/modules/notification_communication/presentation/api/v1/chat.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for private messages: send one, read a conversation, see the list
# of people you have talked to and find someone new to talk to.
#
# 🧪 Purpose (Technical Summary):
# Chat endpoints. Sending commits the message first and then schedules the directed
# notification fan-out as a background job whose failures are only logged.
#
# 🔗 Dependencies:
# - ConversationService, chat/user repositories
# - NotificationFanout via app state, shared.core.background.run_detached
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.api.v1.router (mounted under /chat)

import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from plantcare_social.modules.user_management.domain.models.user import User
from plantcare_social.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from plantcare_social.modules.user_management.presentation.dependencies import get_current_user
from plantcare_social.shared.core.background import run_detached
from plantcare_social.shared.core.dependencies import get_notification_fanout
from plantcare_social.shared.infrastructure.database.session import get_db_session

from ....domain.services.conversation_service import ConversationService
from ....domain.services.fanout import NotificationFanout
from ....infrastructure.database.chat_repository_impl import ChatRepositoryImpl
from ..schemas.chat_schemas import SendMessageRequest

logger = logging.getLogger(__name__)

chat_router = APIRouter()


def get_conversation_service(db: AsyncSession = Depends(get_db_session)) -> ConversationService:
    return ConversationService(ChatRepositoryImpl(db), UserRepositoryImpl(db))


@chat_router.post("/send", summary="Send a direct message")
async def send_message(
    payload: SendMessageRequest,
    background_tasks: BackgroundTasks,
    current_user: User = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
    db: AsyncSession = Depends(get_db_session),
    fanout: NotificationFanout = Depends(get_notification_fanout),
):
    chat = await service.send(current_user, payload.receiver_email, payload.message)
    await db.commit()

    background_tasks.add_task(run_detached, "message_notification", fanout.notify_message, chat)
    return {"success": True, "chat": chat}


@chat_router.get("/messages/{peer_email}", summary="Conversation thread with a peer")
async def get_messages(
    peer_email: str,
    current_user: User = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
    db: AsyncSession = Depends(get_db_session),
):
    messages, _ = await service.open_thread(current_user.email, peer_email.strip().lower())
    await db.commit()
    return {"success": True, "messages": messages}


@chat_router.get("/conversations", summary="Conversation partners, most recent first")
async def get_conversations(
    current_user: User = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    return {"success": True, "conversations": await service.conversations(current_user.email)}


@chat_router.get("/users", summary="Users available to start a conversation with")
async def get_chat_users(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    users = await UserRepositoryImpl(db).list_except(current_user.email)
    return {"success": True, "users": [user.to_public_dict() for user in users]}
