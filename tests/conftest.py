"""
Shared fixtures: a fresh application per test on its own SQLite file.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-plantcare-social-tests")
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("GROQ_API_KEY", None)
os.environ.pop("SENDGRID_API_KEY", None)

from typing import Any, Dict, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from plantcare_social.main import create_application  # noqa: E402
from plantcare_social.shared.config.settings import get_settings  # noqa: E402
from plantcare_social.shared.core.security import get_security_manager  # noqa: E402

PASSWORD = "leafy-secret"


def _reset_caches() -> None:
    get_settings.cache_clear()
    get_security_manager.cache_clear()


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'plantcare.db'}")
    _reset_caches()
    application = create_application()
    yield application
    application.dependency_overrides.clear()
    _reset_caches()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Register a user and return (token, user dict)."""

    def _register(email: str, name: Optional[str] = None, **extra: Any):
        response = client.post(
            "/auth/register",
            json={"name": name or email.split("@")[0].title(), "email": email, "password": PASSWORD, **extra},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["user"]

    return _register


@pytest.fixture
def alice(register):
    token, _ = register("alice@plants.io", "Alice")
    return token


@pytest.fixture
def bob(register):
    token, _ = register("bob@plants.io", "Bob")
    return token


@pytest.fixture
def carol(register):
    token, _ = register("carol@plants.io", "Carol")
    return token
