from conftest import auth_headers


def _notifications(client, token):
    return client.get("/notifications", headers=auth_headers(token)).json()["notifications"]


class TestFollowGraph:

    def test_follow_updates_both_sides(self, client, alice, bob):
        response = client.post("/follow/follow/bob@plants.io", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json()["following"] == ["bob@plants.io"]
        assert response.json()["followers"] == ["alice@plants.io"]

        assert client.get("/follow/counts/alice@plants.io").json()["followingCount"] == 1
        assert client.get("/follow/counts/bob@plants.io").json()["followersCount"] == 1
        status = client.get("/follow/status/bob@plants.io", headers=auth_headers(alice)).json()
        assert status["isFollowing"] is True

    def test_self_follow_is_rejected(self, client, alice):
        response = client.post("/follow/follow/alice@plants.io", headers=auth_headers(alice))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "SELF_FOLLOW_REJECTED"

    def test_second_follow_is_rejected_without_duplicates(self, client, alice, bob):
        client.post("/follow/follow/bob@plants.io", headers=auth_headers(alice))
        response = client.post("/follow/follow/bob@plants.io", headers=auth_headers(alice))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ALREADY_FOLLOWING"
        assert client.get("/follow/counts/bob@plants.io").json()["followersCount"] == 1

    def test_follow_unknown_user_is_not_found(self, client, alice):
        response = client.post("/follow/follow/ghost@plants.io", headers=auth_headers(alice))
        assert response.status_code == 404

    def test_unfollow_is_idempotent(self, client, alice, bob):
        client.post("/follow/follow/bob@plants.io", headers=auth_headers(alice))

        first = client.post("/follow/unfollow/bob@plants.io", headers=auth_headers(alice))
        second = client.post("/follow/unfollow/bob@plants.io", headers=auth_headers(alice))

        assert first.status_code == second.status_code == 200
        assert second.json()["following"] == []
        assert client.get("/follow/counts/bob@plants.io").json()["followersCount"] == 0

    def test_follow_notifies_followed_user(self, client, alice, bob):
        client.post("/follow/follow/bob@plants.io", headers=auth_headers(alice))

        notifications = _notifications(client, bob)
        assert len(notifications) == 1
        assert notifications[0]["type"] == "update"
        assert notifications[0]["title"] == "New Follower"
        assert notifications[0]["relatedEmail"] == "alice@plants.io"
        assert _notifications(client, alice) == []
