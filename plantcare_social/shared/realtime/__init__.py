# 📄 File: plantcare_social/shared/realtime/__init__.py
# 🧭 Purpose (Layman Explanation):
# The live notification plumbing: open connections, who they belong to, and how
# an alert reaches them.
#
# 🧪 Purpose (Technical Summary):
# Exports the Connection contract, WebSocketConnection, ChannelRegistry and RealtimeEventBus.
#
# 🔗 Dependencies:
# - asyncio
# - FastAPI/Starlette WebSocket
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (lifespan)
# - api.realtime
# - NotificationFanout

"""Live delivery: connection contract, channel registry and event bus."""

from .connection import Connection, WebSocketConnection
from .event_bus import NOTIFICATION_EVENT, RealtimeEventBus
from .registry import ChannelRegistry

__all__ = [
    "ChannelRegistry",
    "Connection",
    "NOTIFICATION_EVENT",
    "RealtimeEventBus",
    "WebSocketConnection",
]
