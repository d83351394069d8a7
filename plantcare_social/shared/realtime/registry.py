# 📄 File: plantcare_social/shared/realtime/registry.py
# 🧭 Purpose (Layman Explanation):
# Keeps track of which open app connections belong to which person, so an alert
# meant for someone reaches every phone or browser they have open.
#
# 🧪 Purpose (Technical Summary):
# In-process identity -> connection-set map with join, leave and lookup.
# A connection belongs to at most one identity; re-joining under another identity moves it.
#
# 🔗 Dependencies:
# - stdlib logging
#
# 🔄 Connected Modules / Calls From:
# - api.realtime (join on register, leave on close)
# - RealtimeEventBus (lookup)
# - api.v1.health (stats)

"""
Channel registry: the in-process map from identity to its live connections.

Every operation runs to completion without awaiting, so on a single event loop
join/leave/lookup are each one atomic step for every other handler.
"""

import logging
from typing import Dict, FrozenSet, Optional, Set

from .connection import Connection

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """Process-lifetime owner of identity -> connections routing state."""

    def __init__(self):
        self._channels: Dict[str, Set[Connection]] = {}
        self._owners: Dict[Connection, str] = {}

    def join(self, identity: str, connection: Connection) -> bool:
        """
        Attach a connection to an identity's channel.

        Re-joining the same identity is a no-op. A connection that re-registers
        under a different identity is moved, since it may belong to one only.

        Returns:
            bool: True if the registry changed
        """
        current = self._owners.get(connection)
        if current == identity:
            return False
        if current is not None:
            self._discard(current, connection)
            logger.info(f"Connection {connection.connection_id} moved from {current} to {identity}")

        self._channels.setdefault(identity, set()).add(connection)
        self._owners[connection] = identity
        logger.debug(
            f"Connection {connection.connection_id} joined {identity} "
            f"({len(self._channels[identity])} live)"
        )
        return True

    def leave(self, connection: Connection) -> Optional[str]:
        """
        Detach a connection from whichever identity holds it.

        Returns:
            Optional[str]: The identity it was attached to, None if never joined
        """
        identity = self._owners.pop(connection, None)
        if identity is not None:
            self._discard(identity, connection)
            logger.debug(f"Connection {connection.connection_id} left {identity}")
        return identity

    def lookup(self, identity: str) -> FrozenSet[Connection]:
        """Snapshot of the identity's live connections, empty if unreachable."""
        return frozenset(self._channels.get(identity, ()))

    def identity_of(self, connection: Connection) -> Optional[str]:
        return self._owners.get(connection)

    def _discard(self, identity: str, connection: Connection) -> None:
        connections = self._channels.get(identity)
        if connections is None:
            return
        connections.discard(connection)
        if not connections:
            del self._channels[identity]

    @property
    def connection_count(self) -> int:
        return len(self._owners)

    @property
    def identity_count(self) -> int:
        return len(self._channels)

    def stats(self) -> Dict[str, int]:
        return {
            "connections": self.connection_count,
            "identities": self.identity_count,
        }
