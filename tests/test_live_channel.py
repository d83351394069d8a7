"""
End-to-end live delivery over the /ws endpoint.
"""

import pytest
from sqlalchemy import exc
from starlette.websockets import WebSocketDisconnect

from conftest import auth_headers

from plantcare_social.modules.notification_communication.domain.services.fanout import NotificationFanout
from plantcare_social.modules.notification_communication.infrastructure.database.notification_repository_impl import (
    NotificationRepositoryImpl,
)
from plantcare_social.shared.core.dependencies import get_notification_fanout
from plantcare_social.shared.infrastructure.database.session import session_manager


def _register_socket(websocket, token):
    websocket.send_json({"type": "register", "data": {"token": token}})
    return websocket.receive_json()


class RejectingNotificationRepository(NotificationRepositoryImpl):
    """Notification store whose writes fail like a full disk."""

    async def create(self, notification):
        raise exc.OperationalError("INSERT INTO notifications", {}, Exception("disk I/O error"))

    async def create_many(self, notifications):
        raise exc.OperationalError("INSERT INTO notifications", {}, Exception("disk I/O error"))


def _rejecting_fanout(app):
    return NotificationFanout(
        session_manager,
        app.state.event_bus,
        notification_repository_factory=RejectingNotificationRepository,
    )


def _notifications(client, token):
    return client.get("/notifications", headers=auth_headers(token)).json()["notifications"]


class TestLiveChannel:

    def test_register_acknowledges_identity(self, app, client, alice):
        with client.websocket_connect("/ws") as websocket:
            ack = _register_socket(websocket, alice)

            assert ack == {"type": "registered", "data": {"email": "alice@plants.io"}}
            assert app.state.channel_registry.stats() == {"connections": 1, "identities": 1}

    def test_ping_pong(self, client):
        with client.websocket_connect("/ws") as websocket:
            websocket.send_json({"type": "ping"})
            assert websocket.receive_json()["type"] == "pong"

    def test_invalid_credential_closes_connection_without_joining(self, app, client):
        with client.websocket_connect("/ws") as websocket:
            error = _register_socket(websocket, "forged-token")
            assert error["type"] == "error"

            with pytest.raises(WebSocketDisconnect) as closed:
                websocket.receive_json()
            assert closed.value.code == 1008

        assert app.state.channel_registry.connection_count == 0

    def test_live_message_notification_matches_stored_record(self, client, alice, bob):
        with client.websocket_connect("/ws") as websocket:
            _register_socket(websocket, bob)

            client.post(
                "/chat/send",
                headers=auth_headers(alice),
                json={"receiverEmail": "bob@plants.io", "message": "Water the ferns"},
            )
            frame = websocket.receive_json()

        assert frame["type"] == "notification:new"
        stored = client.get("/notifications", headers=auth_headers(bob)).json()["notifications"]
        assert len(stored) == 1
        assert frame["data"]["id"] == stored[0]["id"]
        assert frame["data"]["message"] == stored[0]["message"] == "Alice: Water the ferns"
        assert frame["data"]["type"] == "message"

    def test_every_connection_of_identity_receives_post_notification(self, client, alice, bob):
        with client.websocket_connect("/ws") as phone, client.websocket_connect("/ws") as laptop:
            _register_socket(phone, bob)
            _register_socket(laptop, bob)

            client.post(
                "/posts/addPost",
                headers=auth_headers(alice),
                json={"caption": "New leaf!", "image": "https://img.plants.io/leaf.jpg"},
            )

            assert phone.receive_json()["data"]["title"] == "New Post"
            assert laptop.receive_json()["data"]["title"] == "New Post"

    def test_offline_recipient_still_gets_stored_notification(self, client, alice, bob):
        client.post(
            "/chat/send",
            headers=auth_headers(alice),
            json={"receiverEmail": "bob@plants.io", "message": "Are you there?"},
        )

        stored = client.get("/notifications", headers=auth_headers(bob)).json()["notifications"]
        assert len(stored) == 1
        assert stored[0]["read"] is False

    def test_binary_frame_gets_error_and_connection_stays_usable(self, app, client, alice):
        with client.websocket_connect("/ws") as websocket:
            _register_socket(websocket, alice)

            websocket.send_bytes(b"\x00\x01")
            error = websocket.receive_json()

            websocket.send_json({"type": "ping"})
            pong = websocket.receive_json()

            assert app.state.channel_registry.connection_count == 1

        assert error == {"type": "error", "data": {"message": "Binary frames are not supported"}}
        assert pong["type"] == "pong"

    def test_non_json_text_frame_gets_error(self, client):
        with client.websocket_connect("/ws") as websocket:
            websocket.send_text("not json")
            error = websocket.receive_json()

        assert error == {"type": "error", "data": {"message": "Frames must be JSON objects"}}


class TestRejectedNotificationWrites:

    def test_post_still_created_and_nothing_pushed(self, app, client, alice, bob):
        app.dependency_overrides[get_notification_fanout] = lambda: _rejecting_fanout(app)

        with client.websocket_connect("/ws") as websocket:
            _register_socket(websocket, bob)

            response = client.post(
                "/posts/addPost",
                headers=auth_headers(alice),
                json={"caption": "Repotted", "image": "https://img.plants.io/pot.jpg"},
            )
            websocket.send_json({"type": "ping"})
            frame = websocket.receive_json()

        assert response.status_code == 201
        assert frame["type"] == "pong"
        assert _notifications(client, bob) == []
        assert len(client.get("/posts/getposts").json()["posts"]) == 1

    def test_message_still_stored_and_nothing_pushed(self, app, client, alice, bob):
        app.dependency_overrides[get_notification_fanout] = lambda: _rejecting_fanout(app)

        with client.websocket_connect("/ws") as websocket:
            _register_socket(websocket, bob)

            response = client.post(
                "/chat/send",
                headers=auth_headers(alice),
                json={"receiverEmail": "bob@plants.io", "message": "Did you water them?"},
            )
            websocket.send_json({"type": "ping"})
            frame = websocket.receive_json()

        assert response.status_code == 200
        assert frame["type"] == "pong"
        assert _notifications(client, bob) == []
        thread = client.get("/chat/messages/alice@plants.io", headers=auth_headers(bob)).json()
        assert [m["message"] for m in thread["messages"]] == ["Did you water them?"]
