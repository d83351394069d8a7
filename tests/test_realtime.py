"""
Channel registry, event bus and WebSocket connection behaviour without a server.
"""

import asyncio

from plantcare_social.shared.realtime.connection import Connection, WebSocketConnection
from plantcare_social.shared.realtime.event_bus import NOTIFICATION_EVENT, RealtimeEventBus
from plantcare_social.shared.realtime.registry import ChannelRegistry


class FakeConnection(Connection):
    def __init__(self, accept: bool = True):
        super().__init__()
        self.accept = accept
        self.events = []

    def push(self, event, payload):
        if not self.accept:
            return False
        self.events.append((event, payload))
        return True


class ExplodingConnection(Connection):
    def push(self, event, payload):
        raise RuntimeError("socket gone")


class FakeWebSocket:
    def __init__(self):
        self.sent = []
        self.closed_with = None

    async def send_json(self, data):
        await asyncio.sleep(0)
        self.sent.append(data)

    async def close(self, code=1000, reason=None):
        self.closed_with = code


class TestChannelRegistry:

    def test_join_is_idempotent(self):
        registry = ChannelRegistry()
        connection = FakeConnection()

        assert registry.join("alice@plants.io", connection) is True
        assert registry.join("alice@plants.io", connection) is False
        assert registry.lookup("alice@plants.io") == frozenset({connection})
        assert registry.connection_count == 1

    def test_identity_can_hold_many_connections(self):
        registry = ChannelRegistry()
        phone, laptop = FakeConnection(), FakeConnection()

        registry.join("alice@plants.io", phone)
        registry.join("alice@plants.io", laptop)

        assert registry.lookup("alice@plants.io") == frozenset({phone, laptop})
        assert registry.stats() == {"connections": 2, "identities": 1}

    def test_rejoin_under_other_identity_moves_connection(self):
        registry = ChannelRegistry()
        connection = FakeConnection()

        registry.join("alice@plants.io", connection)
        registry.join("bob@plants.io", connection)

        assert registry.lookup("alice@plants.io") == frozenset()
        assert registry.lookup("bob@plants.io") == frozenset({connection})
        assert registry.identity_of(connection) == "bob@plants.io"

    def test_leave_removes_connection_and_empty_identity(self):
        registry = ChannelRegistry()
        connection = FakeConnection()
        registry.join("alice@plants.io", connection)

        assert registry.leave(connection) == "alice@plants.io"
        assert registry.lookup("alice@plants.io") == frozenset()
        assert registry.stats() == {"connections": 0, "identities": 0}

    def test_leave_without_join_is_noop(self):
        registry = ChannelRegistry()
        assert registry.leave(FakeConnection()) is None

    def test_lookup_returns_snapshot(self):
        registry = ChannelRegistry()
        first = FakeConnection()
        registry.join("alice@plants.io", first)

        snapshot = registry.lookup("alice@plants.io")
        registry.join("alice@plants.io", FakeConnection())

        assert snapshot == frozenset({first})


class TestRealtimeEventBus:

    def test_emit_reaches_every_connection_of_identity(self):
        registry = ChannelRegistry()
        bus = RealtimeEventBus(registry)
        phone, laptop, other = FakeConnection(), FakeConnection(), FakeConnection()
        registry.join("alice@plants.io", phone)
        registry.join("alice@plants.io", laptop)
        registry.join("bob@plants.io", other)

        delivered = bus.emit_to("alice@plants.io", NOTIFICATION_EVENT, {"title": "New Post"})

        assert delivered == 2
        assert phone.events == [(NOTIFICATION_EVENT, {"title": "New Post"})]
        assert laptop.events == [(NOTIFICATION_EVENT, {"title": "New Post"})]
        assert other.events == []

    def test_emit_to_offline_identity_is_silent(self):
        bus = RealtimeEventBus(ChannelRegistry())
        assert bus.emit_to("nobody@plants.io", NOTIFICATION_EVENT, {}) == 0

    def test_failing_connection_does_not_block_others(self):
        registry = ChannelRegistry()
        bus = RealtimeEventBus(registry)
        healthy = FakeConnection()
        registry.join("alice@plants.io", ExplodingConnection())
        registry.join("alice@plants.io", healthy)

        assert bus.emit_to("alice@plants.io", "pong", {}) == 1
        assert healthy.events == [("pong", {})]

    def test_refused_push_is_not_counted(self):
        registry = ChannelRegistry()
        bus = RealtimeEventBus(registry)
        registry.join("alice@plants.io", FakeConnection(accept=False))

        assert bus.emit_to("alice@plants.io", "pong", {}) == 0

    def test_deliver_many_sends_each_recipient_its_own_payload(self):
        registry = ChannelRegistry()
        bus = RealtimeEventBus(registry)
        alice, bob = FakeConnection(), FakeConnection()
        registry.join("alice@plants.io", alice)
        registry.join("bob@plants.io", bob)

        delivered = bus.deliver_many(
            [("alice@plants.io", {"id": "n1"}), ("bob@plants.io", {"id": "n2"}), ("carol@plants.io", {"id": "n3"})],
            NOTIFICATION_EVENT,
        )

        assert delivered == 2
        assert alice.events == [(NOTIFICATION_EVENT, {"id": "n1"})]
        assert bob.events == [(NOTIFICATION_EVENT, {"id": "n2"})]

    def test_broadcast_isolates_failures_across_identities(self):
        registry = ChannelRegistry()
        bus = RealtimeEventBus(registry)
        healthy = FakeConnection()
        registry.join("alice@plants.io", ExplodingConnection())
        registry.join("bob@plants.io", healthy)

        delivered = bus.broadcast(
            ["alice@plants.io", "bob@plants.io", "carol@plants.io"], NOTIFICATION_EVENT, {"title": "New Post"}
        )

        assert delivered == 1
        assert healthy.events == [(NOTIFICATION_EVENT, {"title": "New Post"})]


class TestWebSocketConnection:

    def test_frames_are_written_in_push_order_before_close(self):
        websocket = FakeWebSocket()

        async def scenario():
            connection = WebSocketConnection(websocket, max_backlog=10)
            connection.start()
            for index in range(5):
                assert connection.push("notification:new", {"n": index})
            connection.close(code=1008)
            await connection.wait_closed()
            assert connection.push("late", {}) is False

        asyncio.run(scenario())

        assert [frame["data"]["n"] for frame in websocket.sent] == [0, 1, 2, 3, 4]
        assert all(frame["type"] == "notification:new" for frame in websocket.sent)
        assert websocket.closed_with == 1008

    def test_full_backlog_drops_event(self):
        websocket = FakeWebSocket()

        async def scenario():
            connection = WebSocketConnection(websocket, max_backlog=2)
            # Writer not started, so nothing drains
            assert connection.push("a", {}) is True
            assert connection.push("b", {}) is True
            assert connection.push("c", {}) is False
            await connection.shutdown()

        asyncio.run(scenario())
        assert websocket.sent == []
