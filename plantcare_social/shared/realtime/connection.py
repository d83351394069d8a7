# 📄 File: plantcare_social/shared/realtime/connection.py
#
# 🧭 Purpose (Layman Explanation):
# One open "live line" to a phone or browser tab. Messages for that device wait in
# a short line-up and are sent one after another in the order they arrived.
#
# 🧪 Purpose (Technical Summary):
# Connection contract consumed by the channel registry and event bus, plus the
# WebSocket implementation: a non-blocking push() feeding a per-connection FIFO
# drained by a dedicated writer task. A bounded backlog drops (and logs) events for
# a slow client instead of growing without limit; close frames always fit.
#
# 🔗 Dependencies:
# - asyncio (queue and writer task)
# - starlette WebSocket (via FastAPI)
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social/api/realtime.py (creates and closes connections)
# - plantcare_social/shared/realtime/registry.py, event_bus.py

import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import uuid4

from fastapi import WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


class Connection(ABC):
    """A live bidirectional channel that can receive named server events."""

    def __init__(self):
        self.connection_id = uuid4().hex

    @abstractmethod
    def push(self, event: str, payload: Any) -> bool:
        """
        Queue an event for delivery without suspending.

        Returns:
            bool: False when the event was not accepted
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.connection_id}>"


class _CloseFrame:
    __slots__ = ("code", "reason")

    def __init__(self, code: int, reason: str):
        self.code = code
        self.reason = reason


class WebSocketConnection(Connection):
    """
    Connection backed by a FastAPI WebSocket.

    Outbound frames are written as {"type": event, "data": payload} by a single
    writer task, so per-connection order equals push order.
    """

    def __init__(self, websocket: WebSocket, max_backlog: int = 256):
        super().__init__()
        self._websocket = websocket
        self._max_backlog = max_backlog
        self._queue: asyncio.Queue = asyncio.Queue()
        self._writer: Optional[asyncio.Task] = None
        self._closing = False

    @property
    def is_open(self) -> bool:
        return not self._closing

    def start(self) -> None:
        """Start the writer task. Must be called from the event loop."""
        if self._writer is None:
            self._writer = asyncio.create_task(self._drain(), name=f"ws-writer-{self.connection_id}")

    def push(self, event: str, payload: Any) -> bool:
        if self._closing:
            return False
        if self._queue.qsize() >= self._max_backlog:
            logger.warning(
                f"Outbound backlog full for connection {self.connection_id}, dropping '{event}'"
            )
            return False
        self._queue.put_nowait({"type": event, "data": payload})
        return True

    def close(self, code: int = 1000, reason: str = "") -> None:
        """Queue a close frame behind everything already pushed."""
        if self._closing:
            return
        self._closing = True
        self._queue.put_nowait(_CloseFrame(code, reason))

    async def wait_closed(self) -> None:
        """Wait until the writer has flushed the backlog and sent the close frame."""
        if self._writer is not None:
            await self._writer

    async def shutdown(self) -> None:
        """Stop the writer immediately, discarding anything still queued."""
        self._closing = True
        if self._writer is not None and not self._writer.done():
            self._writer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._writer

    async def _drain(self) -> None:
        while True:
            item = await self._queue.get()
            try:
                if isinstance(item, _CloseFrame):
                    await self._websocket.close(code=item.code, reason=item.reason)
                    return
                await self._websocket.send_json(item)
            except (WebSocketDisconnect, RuntimeError) as e:
                # Peer is gone; nothing left to deliver on this channel
                logger.info(f"Connection {self.connection_id} stopped writing: {e}")
                self._closing = True
                return
