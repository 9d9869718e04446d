"""
Shared fixtures for unit and integration tests.
"""

import pytest
from fastapi.testclient import TestClient

from tasktracker.config import Settings
from tasktracker.infrastructure.db.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from tasktracker.main import create_application


TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def settings():
    """Settings for an isolated in-memory database and cheap hashing."""
    return Settings(
        environment="testing",
        database_url="sqlite://",
        jwt_secret_key=TEST_SECRET_KEY,
        bcrypt_rounds=4,
    )


@pytest.fixture
def db_session():
    """Session bound to a fresh in-memory database."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register a user and return (token, user) from the response."""

    def _register(name="Ana", email="ana@x.com", password="secret1"):
        response = client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["user"]

    return _register


@pytest.fixture
def auth_headers():
    """Build the Authorization header for a token."""

    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    return _headers
