"""
Integration tests for registration, login and the authentication gate.
"""

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt


class TestRegistration:
    """Test cases for POST /api/register."""

    def test_register_returns_token_for_new_user(self, client, settings):
        response = client.post(
            "/api/register",
            json={"name": "Ana", "email": "ana@x.com", "password": "secret1"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["user"]["email"] == "ana@x.com"
        assert body["user"]["name"] == "Ana"
        assert "password" not in body["user"]

        claims = jwt.decode(body["token"], settings.jwt_secret_key, algorithms=["HS256"])
        assert claims["data"]["id"] == body["user"]["id"]
        assert claims["exp"] - claims["iat"] == 3600

    def test_duplicate_email_is_conflict(self, client, register_user):
        register_user(email="ana@x.com")

        response = client.post(
            "/api/register",
            json={"name": "Ana", "email": "ANA@x.com", "password": "secret1"}
        )

        assert response.status_code == 409
        assert response.json()["success"] is False
        assert response.json()["status"] == 409

    @pytest.mark.parametrize("payload,message", [
        ({"email": "ana@x.com", "password": "secret1"}, "All fields are required"),
        ({"name": "Ana", "email": "ana", "password": "secret1"}, "Invalid email"),
        ({"name": "Ana", "email": "ana@x.com", "password": "12345"},
         "Password must be at least 6 characters"),
    ])
    def test_invalid_registration(self, client, payload, message):
        response = client.post("/api/register", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": message, "status": 400}

    def test_unknown_field_is_rejected(self, client):
        response = client.post(
            "/api/register",
            json={"name": "Ana", "email": "ana@x.com", "password": "secret1", "role": "admin"}
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_malformed_body_is_rejected(self, client):
        response = client.post(
            "/api/register",
            content="not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400


class TestLogin:
    """Test cases for POST /api/login."""

    def test_login_success(self, client, register_user, settings):
        _, user = register_user()

        response = client.post("/api/login", json={"email": "ana@x.com", "password": "secret1"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"] == user
        claims = jwt.decode(body["token"], settings.jwt_secret_key, algorithms=["HS256"])
        assert claims["data"]["id"] == user["id"]

    def test_wrong_password(self, client, register_user):
        register_user()

        response = client.post("/api/login", json={"email": "ana@x.com", "password": "secret2"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    def test_unknown_email(self, client):
        response = client.post("/api/login", json={"email": "who@x.com", "password": "secret1"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    def test_missing_fields(self, client):
        response = client.post("/api/login", json={"email": "ana@x.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Email and password are required"


class TestAuthenticationGate:
    """Test cases for bearer token enforcement on protected routes."""

    def test_missing_token(self, client):
        response = client.get("/api/tasks")

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Access token required",
            "status": 401,
        }
        assert response.headers["www-authenticate"] == "Bearer"

    def test_non_bearer_scheme(self, client, register_user):
        token, _ = register_user()

        response = client.get("/api/tasks", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 401
        assert response.json()["error"] == "Access token required"

    def test_garbage_token(self, client, auth_headers):
        response = client.get("/api/tasks", headers=auth_headers("garbage"))

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_foreign_signature(self, client, register_user, auth_headers):
        _, user = register_user()
        now = int(time.time())
        forged = jwt.encode(
            {"iat": now, "exp": now + 3600, "data": {"id": user["id"]}},
            "not-the-server-secret",
            algorithm="HS256"
        )

        response = client.get("/api/tasks", headers=auth_headers(forged))

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_expired_token(self, client, register_user, settings, auth_headers):
        _, user = register_user()
        issued = int(time.time()) - 7200
        expired = jwt.encode(
            {"iat": issued, "exp": issued + 3600, "data": {"id": user["id"]}},
            settings.jwt_secret_key,
            algorithm="HS256"
        )

        response = client.get("/api/tasks", headers=auth_headers(expired))

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_unknown_api_route_requires_token(self, client):
        assert client.get("/api/nothing-here").status_code == 401

    def test_cors_preflight_passes(self, client):
        response = client.options(
            "/api/tasks",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Authorization",
            }
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestPublicEndpoints:
    """Test cases for unauthenticated service endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "Task Manager API"
        assert isinstance(body["timestamp"], int)

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Task Manager API"

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/nothing-here")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["status"] == 404

    def test_unhandled_error_is_generic_500(self, app):
        def explode():
            raise RuntimeError("database password is hunter2")

        app.add_api_route("/boom", explode)

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "status": 500,
        }
