from conftest import auth_headers


def _seed(client, sender, count):
    for index in range(count):
        client.post(
            "/chat/send",
            headers=auth_headers(sender),
            json={"receiverEmail": "bob@plants.io", "message": f"message {index}"},
        )


class TestNotificationInbox:

    def test_listing_is_newest_first(self, client, alice, bob):
        _seed(client, alice, 3)

        notifications = client.get("/notifications", headers=auth_headers(bob)).json()["notifications"]
        assert [n["message"] for n in notifications] == ["Alice: message 2", "Alice: message 1", "Alice: message 0"]

    def test_unread_count_and_mark_one_read(self, client, alice, bob):
        _seed(client, alice, 2)
        headers = auth_headers(bob)
        first = client.get("/notifications", headers=headers).json()["notifications"][0]

        assert client.get("/notifications/unread-count", headers=headers).json()["count"] == 2
        marked = client.put(f"/notifications/read/{first['id']}", headers=headers)
        assert marked.json()["notification"]["read"] is True
        assert client.get("/notifications/unread-count", headers=headers).json()["count"] == 1

    def test_mark_all_read(self, client, alice, bob):
        _seed(client, alice, 3)
        headers = auth_headers(bob)

        assert client.put("/notifications/read-all", headers=headers).json()["updatedCount"] == 3
        assert client.get("/notifications/unread-count", headers=headers).json()["count"] == 0

    def test_other_users_notification_is_not_found(self, client, alice, bob):
        _seed(client, alice, 1)
        notification_id = client.get("/notifications", headers=auth_headers(bob)).json()["notifications"][0]["id"]

        assert client.put(f"/notifications/read/{notification_id}", headers=auth_headers(alice)).status_code == 404
        assert client.delete(f"/notifications/{notification_id}", headers=auth_headers(alice)).status_code == 404

    def test_delete_one_and_clear_all(self, client, alice, bob):
        _seed(client, alice, 3)
        headers = auth_headers(bob)
        notification_id = client.get("/notifications", headers=headers).json()["notifications"][0]["id"]

        assert client.delete(f"/notifications/{notification_id}", headers=headers).status_code == 200
        assert client.delete("/notifications/clear-all", headers=headers).json()["deletedCount"] == 2
        assert client.get("/notifications", headers=headers).json()["notifications"] == []
