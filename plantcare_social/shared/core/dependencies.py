"""
Common FastAPI dependencies.
Expose the process-lifetime services created in the application lifespan.
"""

from typing import TYPE_CHECKING

from fastapi import Request

from ..infrastructure.database.session import get_db_session
from ..infrastructure.external_apis.groq_client import GroqClient
from ..infrastructure.external_apis.mail_client import SendGridClient
from ..realtime.registry import ChannelRegistry

if TYPE_CHECKING:
    from plantcare_social.modules.notification_communication.domain.services.fanout import NotificationFanout

__all__ = [
    "get_ai_client",
    "get_channel_registry",
    "get_db_session",
    "get_mail_client",
    "get_notification_fanout",
]


def get_channel_registry(request: Request) -> ChannelRegistry:
    return request.app.state.channel_registry


def get_notification_fanout(request: Request) -> "NotificationFanout":
    """Fan-out engine owned by the app."""
    return request.app.state.notification_fanout


def get_ai_client(request: Request) -> GroqClient:
    return request.app.state.ai_client


def get_mail_client(request: Request) -> SendGridClient:
    return request.app.state.mail_client
