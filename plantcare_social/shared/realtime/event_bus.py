# 📄 File: plantcare_social/shared/realtime/event_bus.py
#
# 🧭 Purpose (Layman Explanation):
# The app's "mail carrier" for live updates: given a person (or many people) and a
# message, it hands the message to every device that person currently has open.
#
# 🧪 Purpose (Technical Summary):
# Best-effort named-event delivery over the channel registry. Payloads are encoded
# once with FastAPI's jsonable_encoder, pushed to each connection without awaiting,
# and every connection is isolated so one failure never stops delivery to the rest.
# Identities with no live connection are a silent no-op.
#
# 🔗 Dependencies:
# - fastapi.encoders (payload serialization)
# - plantcare_social/shared/realtime/registry.py
#
# 🔄 Connected Modules / Calls From:
# - notification_communication fan-out engine
# - plantcare_social/main.py (constructed in lifespan)

import logging
from typing import Any, Iterable, Tuple

from fastapi.encoders import jsonable_encoder

from .registry import ChannelRegistry

logger = logging.getLogger(__name__)

# Server -> client event carrying a full notification record
NOTIFICATION_EVENT = "notification:new"


class RealtimeEventBus:
    """
    Delivers named events to the live connections of one or many identities.
    """

    def __init__(self, registry: ChannelRegistry):
        self._registry = registry

    @property
    def registry(self) -> ChannelRegistry:
        return self._registry

    def emit_to(self, identity: str, event: str, payload: Any) -> int:
        """
        Push an event to every live connection of an identity.

        Args:
            identity: Routing key (user email)
            event: Event name
            payload: JSON-encodable payload

        Returns:
            int: Number of connections that accepted the event
        """
        connections = self._registry.lookup(identity)
        if not connections:
            logger.debug(f"No live connection for {identity}, '{event}' not pushed")
            return 0

        data = jsonable_encoder(payload)
        delivered = 0
        for connection in connections:
            try:
                if connection.push(event, data):
                    delivered += 1
            except Exception:
                logger.exception(f"Delivery of '{event}' to {connection!r} failed")

        return delivered

    def broadcast(self, identities: Iterable[str], event: str, payload: Any) -> int:
        """Push the same payload to every identity in the collection."""
        return sum(self.emit_to(identity, event, payload) for identity in identities)

    def deliver_many(self, deliveries: Iterable[Tuple[str, Any]], event: str) -> int:
        """Push a distinct payload per identity, e.g. each recipient's own notification."""
        return sum(self.emit_to(identity, event, payload) for identity, payload in deliveries)
