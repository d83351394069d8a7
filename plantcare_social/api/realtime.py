# 📄 File: plantcare_social/api/realtime.py
# 🧭 Purpose (Layman Explanation):
# The "live line" endpoint. A phone or browser opens it, proves who it is with its
# login token, and from then on receives new notifications the moment they happen.
#
# 🧪 Purpose (Technical Summary):
# WebSocket endpoint /ws. Client frames are {"type", "data"} envelopes:
#   register {token} -> verify credential, join the identity's channel set, ack "registered"
#   ping             -> "pong"
# Binary or non-JSON frames get an "error" frame and the loop keeps reading.
# A failed register sends an "error" frame and closes with 1008; the connection never
# enters the registry. Every exit path removes the connection from the registry.
#
# 🔗 Dependencies:
# - shared.realtime (WebSocketConnection, ChannelRegistry)
# - user_management IdentityVerifier over a short-lived database session
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (router registration)

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, WebSocket, status

from plantcare_social.modules.user_management.domain.services.identity_verifier import IdentityVerifier
from plantcare_social.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from plantcare_social.shared.config.settings import get_settings
from plantcare_social.shared.core.exceptions import AuthenticationError
from plantcare_social.shared.infrastructure.database.session import session_manager
from plantcare_social.shared.realtime.connection import WebSocketConnection
from plantcare_social.shared.realtime.registry import ChannelRegistry
from plantcare_social.shared.utils.logging import bind_user, log_context

logger = logging.getLogger(__name__)

realtime_router = APIRouter()


def _token_from(data: Any) -> Optional[str]:
    # Clients send either {"token": "..."} or the bare token string
    if isinstance(data, dict):
        data = data.get("token")
    if isinstance(data, str):
        return IdentityVerifier.strip_scheme(data)
    return None


async def _verify(token: Optional[str]):
    async with session_manager.get_session() as session:
        return await IdentityVerifier(UserRepositoryImpl(session)).verify(token)


@realtime_router.websocket("/ws")
async def live_channel(websocket: WebSocket):
    registry: ChannelRegistry = websocket.app.state.channel_registry
    await websocket.accept()

    connection = WebSocketConnection(websocket, max_backlog=get_settings().REALTIME_QUEUE_SIZE)
    connection.start()
    logger.info(f"Live connection {connection.connection_id} opened")

    with log_context(request_id=f"ws-{connection.connection_id}"):
        try:
            while connection.is_open:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break

                text = message.get("text")
                if text is None:
                    connection.push("error", {"message": "Binary frames are not supported"})
                    continue
                try:
                    frame = json.loads(text)
                except ValueError:
                    frame = None

                if not isinstance(frame, dict):
                    connection.push("error", {"message": "Frames must be JSON objects"})
                    continue

                kind = frame.get("type")
                if kind == "register":
                    try:
                        user = await _verify(_token_from(frame.get("data")))
                    except AuthenticationError as e:
                        logger.warning(f"Live connection {connection.connection_id} rejected: {e.message}")
                        connection.push("error", {"message": e.message})
                        connection.close(code=status.WS_1008_POLICY_VIOLATION, reason="Invalid credential")
                        await connection.wait_closed()
                        break

                    registry.join(user.email, connection)
                    bind_user(user.email)
                    connection.push("registered", {"email": user.email})
                    logger.info(f"Live connection {connection.connection_id} registered for {user.email}")
                elif kind == "ping":
                    connection.push("pong", {})
                else:
                    connection.push("error", {"message": f"Unknown event type: {kind}"})
        finally:
            identity = registry.leave(connection)
            await connection.shutdown()
            logger.info(f"Live connection {connection.connection_id} closed (identity={identity})")
