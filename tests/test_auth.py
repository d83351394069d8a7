from conftest import PASSWORD, auth_headers


class TestRegistration:

    def test_register_returns_token_and_public_user(self, client):
        response = client.post(
            "/auth/register",
            json={"name": "Fern", "email": "Fern@Plants.io", "password": PASSWORD, "age": 31, "type": "gardener"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["user"]["email"] == "fern@plants.io"
        assert body["user"]["type"] == "gardener"
        assert body["user"]["following"] == []
        assert "passwordHash" not in body["user"]

    def test_duplicate_email_conflicts(self, client, register):
        register("fern@plants.io")
        response = client.post(
            "/auth/register", json={"name": "Again", "email": "fern@plants.io", "password": PASSWORD}
        )

        assert response.status_code == 409
        assert response.json()["success"] is False

    def test_short_password_is_invalid_input(self, client):
        response = client.post("/auth/register", json={"name": "Fern", "email": "fern@plants.io", "password": "123"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"


class TestLogin:

    def test_login_with_correct_password(self, client, register):
        register("fern@plants.io")
        response = client.post("/auth/login", json={"email": "fern@plants.io", "password": PASSWORD})

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "fern@plants.io"

    def test_wrong_password_is_rejected(self, client, register):
        register("fern@plants.io")
        response = client.post("/auth/login", json={"email": "fern@plants.io", "password": "wrong-password"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIAL"


class TestIdentityVerification:

    def test_me_resolves_bearer_token(self, client, alice):
        response = client.get("/auth/me", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "alice@plants.io"

    def test_missing_credential_is_unauthenticated(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHENTICATED"

    def test_garbage_credential_is_invalid(self, client):
        response = client.get("/auth/me", headers=auth_headers("not-a-token"))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIAL"

    def test_response_carries_request_id(self, client):
        response = client.get("/auth/me", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.json()["error"]["request_id"] == "req-123"
