from conftest import auth_headers


def _send(client, token, receiver, message):
    return client.post("/chat/send", headers=auth_headers(token), json={"receiverEmail": receiver, "message": message})


def _notifications(client, token):
    return client.get("/notifications", headers=auth_headers(token)).json()["notifications"]


class TestSendMessage:

    def test_message_is_stored_and_returned(self, client, alice, bob):
        response = _send(client, alice, "bob@plants.io", "Your monstera looks great")

        assert response.status_code == 200
        chat = response.json()["chat"]
        assert chat["senderEmail"] == "alice@plants.io"
        assert chat["receiverEmail"] == "bob@plants.io"
        assert chat["read"] is False

    def test_receiver_gets_exactly_one_message_notification(self, client, alice, bob):
        chat = _send(client, alice, "bob@plants.io", "Hello Bob").json()["chat"]

        notifications = _notifications(client, bob)
        assert len(notifications) == 1
        notification = notifications[0]
        assert notification["type"] == "message"
        assert notification["title"] == "New Message"
        assert notification["message"] == "Alice: Hello Bob"
        assert notification["relatedId"] == chat["id"]
        assert notification["relatedEmail"] == "alice@plants.io"
        assert _notifications(client, alice) == []

    def test_message_to_self_creates_no_notification(self, client, alice):
        response = _send(client, alice, "alice@plants.io", "note to self")

        assert response.status_code == 200
        assert _notifications(client, alice) == []

    def test_long_message_preview_is_truncated(self, client, alice, bob):
        _send(client, alice, "bob@plants.io", "x" * 80)

        body = _notifications(client, bob)[0]["message"]
        assert body == "Alice: " + "x" * 50 + "..."

    def test_blank_message_is_invalid(self, client, alice, bob):
        response = _send(client, alice, "bob@plants.io", "   ")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_unknown_receiver_is_not_found(self, client, alice):
        assert _send(client, alice, "ghost@plants.io", "hi").status_code == 404


class TestThreadsAndConversations:

    def test_opening_thread_marks_only_peer_messages_read(self, client, alice, bob, carol):
        _send(client, alice, "bob@plants.io", "one")
        _send(client, alice, "bob@plants.io", "two")
        _send(client, carol, "bob@plants.io", "from carol")
        _send(client, bob, "alice@plants.io", "reply")

        thread = client.get("/chat/messages/alice@plants.io", headers=auth_headers(bob)).json()["messages"]
        assert [m["message"] for m in thread] == ["one", "two", "reply"]

        conversations = client.get("/chat/conversations", headers=auth_headers(bob)).json()["conversations"]
        unread = {c["email"]: c["unreadCount"] for c in conversations}
        assert unread == {"alice@plants.io": 0, "carol@plants.io": 1}

        # Bob's reply to Alice stays unread on her side
        alice_view = client.get("/chat/conversations", headers=auth_headers(alice)).json()["conversations"]
        assert alice_view[0]["unreadCount"] == 1

    def test_conversation_summary_uses_latest_message(self, client, alice, bob):
        _send(client, alice, "bob@plants.io", "first")
        _send(client, bob, "alice@plants.io", "latest")

        conversations = client.get("/chat/conversations", headers=auth_headers(alice)).json()["conversations"]
        assert len(conversations) == 1
        assert conversations[0]["email"] == "bob@plants.io"
        assert conversations[0]["name"] == "Bob"
        assert conversations[0]["lastMessage"] == "latest"

    def test_chat_users_excludes_self(self, client, alice, bob, carol):
        users = client.get("/chat/users", headers=auth_headers(alice)).json()["users"]
        assert sorted(u["email"] for u in users) == ["bob@plants.io", "carol@plants.io"]
