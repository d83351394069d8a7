from conftest import auth_headers

from plantcare_social.shared.core.dependencies import get_notification_fanout

IMAGE = "https://img.plants.io/monstera.jpg"


def _add_post(client, token, caption="Monstera update", **extra):
    return client.post("/posts/addPost", headers=auth_headers(token), json={"caption": caption, "image": IMAGE, **extra})


def _notifications(client, token):
    return client.get("/notifications", headers=auth_headers(token)).json()["notifications"]


class FailingFanout:
    async def notify_post(self, *args, **kwargs):
        raise RuntimeError("fan-out exploded")


class TestCreatePost:

    def test_post_notifies_every_other_user_once(self, client, alice, bob, carol):
        response = _add_post(client, alice, caption="My first variegated leaf")

        assert response.status_code == 201
        post = response.json()["post"]
        for token in (bob, carol):
            notifications = _notifications(client, token)
            assert len(notifications) == 1
            assert notifications[0]["type"] == "post"
            assert notifications[0]["relatedId"] == post["id"]
            assert notifications[0]["message"] == "Alice shared a new post: My first variegated leaf"
        assert _notifications(client, alice) == []

    def test_fanout_failure_does_not_fail_the_post(self, app, client, alice, bob):
        app.dependency_overrides[get_notification_fanout] = lambda: FailingFanout()

        response = _add_post(client, alice)

        assert response.status_code == 201
        posts = client.get("/posts/getposts").json()["posts"]
        assert [p["id"] for p in posts] == [response.json()["post"]["id"]]
        assert _notifications(client, bob) == []

    def test_missing_image_is_invalid(self, client, alice):
        response = client.post("/posts/addPost", headers=auth_headers(alice), json={"caption": "no picture"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_requires_authentication(self, client):
        assert client.post("/posts/addPost", json={"caption": "x", "image": IMAGE}).status_code == 401


class TestPostInteractions:

    def test_like_toggles_and_notifies_author_once(self, client, alice, bob):
        post_id = _add_post(client, alice).json()["post"]["id"]

        liked = client.put(f"/posts/like/{post_id}", headers=auth_headers(bob)).json()
        assert liked["liked"] is True
        assert liked["post"]["likeCount"] == 1
        assert liked["post"]["likedBy"] == ["bob@plants.io"]

        unliked = client.put(f"/posts/like/{post_id}", headers=auth_headers(bob)).json()
        assert unliked["liked"] is False
        assert unliked["post"]["likeCount"] == 0

        updates = [n for n in _notifications(client, alice) if n["type"] == "update"]
        assert len(updates) == 1
        assert updates[0]["title"] == "New Like"

    def test_comments_replace_and_delete_by_index(self, client, alice, bob):
        post_id = _add_post(client, alice).json()["post"]["id"]
        comments = [{"email": "bob@plants.io", "text": "Gorgeous"}, {"email": "alice@plants.io", "text": "Thanks"}]

        client.put(f"/posts/comment/{post_id}", headers=auth_headers(bob), json={"comment": comments})
        response = client.delete(f"/posts/comment/{post_id}/0", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json()["post"]["comment"] == [comments[1]]

    def test_bad_comment_index_is_invalid(self, client, alice):
        post_id = _add_post(client, alice).json()["post"]["id"]

        assert client.delete(f"/posts/comment/{post_id}/7", headers=auth_headers(alice)).status_code == 400
        assert client.delete(f"/posts/comment/{post_id}/abc", headers=auth_headers(alice)).status_code == 400

    def test_only_author_can_edit_or_delete(self, client, alice, bob):
        post_id = _add_post(client, alice).json()["post"]["id"]

        assert client.put(f"/posts/update/{post_id}", headers=auth_headers(bob), json={"caption": "hijack"}).status_code == 403
        assert client.delete(f"/posts/delete/{post_id}", headers=auth_headers(bob)).status_code == 403

        edited = client.put(f"/posts/update/{post_id}", headers=auth_headers(alice), json={"caption": "Edited"})
        assert edited.json()["post"]["caption"] == "Edited"
        assert client.delete(f"/posts/delete/{post_id}", headers=auth_headers(alice)).status_code == 200
        assert client.get(f"/posts/{post_id}").status_code == 404
