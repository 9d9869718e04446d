"""
Integration tests for the task endpoints.
"""

from datetime import datetime

import pytest
from jose import jwt


@pytest.fixture
def ana(register_user, auth_headers):
    token, user = register_user(name="Ana", email="ana@x.com")
    return auth_headers(token), user


@pytest.fixture
def bob(register_user, auth_headers):
    token, user = register_user(name="Bob", email="bob@mail.com")
    return auth_headers(token), user


def create_task(client, headers, **payload):
    response = client.post("/api/tasks", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestTaskLifecycle:
    """Test cases for create, read, update and delete."""

    def test_first_task_scenario(self, client, settings):
        """Register, create a task and list it."""
        response = client.post(
            "/api/register",
            json={"name": "Ana", "email": "ana@x.com", "password": "secret1"}
        )
        assert response.status_code == 201
        token = response.json()["token"]
        user_id = response.json()["user"]["id"]
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=["HS256"])
        assert claims["data"]["id"] == user_id
        headers = {"Authorization": f"Bearer {token}"}

        response = client.post("/api/tasks", json={"title": "Test"}, headers=headers)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Task created successfully"
        assert body["data"]["status"] == "pending"
        assert body["data"]["user_id"] == user_id

        response = client.get("/api/tasks", headers=headers)
        assert response.status_code == 200
        listing = response.json()
        assert listing["count"] == 1
        assert [task["id"] for task in listing["data"]] == [body["data"]["id"]]

    def test_task_json_shape(self, client, ana):
        headers, user = ana

        task = create_task(client, headers, title="Buy milk", description="Two litres")

        assert set(task) == {
            "id", "title", "description", "status", "user_id", "created_at", "updated_at"
        }
        assert task["description"] == "Two litres"
        assert task["user_id"] == user["id"]

    def test_get_task(self, client, ana):
        headers, _ = ana
        task = create_task(client, headers, title="Buy milk")

        response = client.get(f"/api/tasks/{task['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": task}

    def test_status_round_trip(self, client, ana):
        headers, _ = ana
        task = create_task(client, headers, title="Buy milk")
        assert task["status"] == "pending"

        response = client.put(
            f"/api/tasks/{task['id']}", json={"status": "completed"}, headers=headers
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert response.json()["message"] == "Task updated successfully"
        assert updated["status"] == "completed"
        assert updated["title"] == "Buy milk"
        assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(
            updated["created_at"]
        )

        response = client.put(
            f"/api/tasks/{task['id']}", json={"status": "pending"}, headers=headers
        )
        assert response.json()["data"]["status"] == "pending"

    def test_delete_twice(self, client, ana):
        headers, _ = ana
        task = create_task(client, headers, title="Buy milk")

        first = client.delete(f"/api/tasks/{task['id']}", headers=headers)
        second = client.delete(f"/api/tasks/{task['id']}", headers=headers)

        assert first.status_code == 200
        assert first.json() == {"success": True, "message": "Task deleted successfully"}
        assert second.status_code == 404
        assert second.json()["error"] == "Task not found"

    def test_missing_task(self, client, ana):
        headers, _ = ana

        response = client.get("/api/tasks/9999", headers=headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Task not found", "status": 404}

    @pytest.mark.parametrize("task_id", ["99999999999999999999", "0", "-1"])
    def test_out_of_range_id_is_not_found(self, client, ana, task_id):
        headers, _ = ana

        fetched = client.get(f"/api/tasks/{task_id}", headers=headers)
        deleted = client.delete(f"/api/tasks/{task_id}", headers=headers)
        updated = client.put(
            f"/api/tasks/{task_id}", json={"title": "Renamed"}, headers=headers
        )

        for response in (fetched, deleted, updated):
            assert response.status_code == 404
            assert response.json()["error"] == "Task not found"

    def test_non_numeric_id(self, client, ana):
        headers, _ = ana

        response = client.get("/api/tasks/abc", headers=headers)

        assert response.status_code == 400


class TestTaskIsolation:
    """Test that another user's tasks look exactly like missing ones."""

    def test_foreign_task_is_not_found(self, client, ana, bob):
        ana_headers, _ = ana
        bob_headers, _ = bob
        task = create_task(client, ana_headers, title="Ana's secret")

        foreign = client.get(f"/api/tasks/{task['id']}", headers=bob_headers)
        missing = client.get("/api/tasks/9999", headers=bob_headers)

        assert foreign.status_code == 404
        assert foreign.json() == missing.json()

    def test_foreign_task_cannot_be_changed(self, client, ana, bob):
        ana_headers, _ = ana
        bob_headers, _ = bob
        task = create_task(client, ana_headers, title="Ana's secret")

        update = client.put(
            f"/api/tasks/{task['id']}", json={"title": "Bob was here"}, headers=bob_headers
        )
        delete = client.delete(f"/api/tasks/{task['id']}", headers=bob_headers)

        assert update.status_code == 404
        assert delete.status_code == 404
        unchanged = client.get(f"/api/tasks/{task['id']}", headers=ana_headers).json()["data"]
        assert unchanged["title"] == "Ana's secret"

    def test_lists_are_per_user(self, client, ana, bob):
        ana_headers, _ = ana
        bob_headers, _ = bob
        create_task(client, ana_headers, title="Ana's task")
        create_task(client, bob_headers, title="Bob's task")

        titles = [task["title"] for task in client.get("/api/tasks", headers=bob_headers).json()["data"]]
        stats = client.get("/api/tasks/stats", headers=bob_headers).json()["data"]

        assert titles == ["Bob's task"]
        assert stats == {"total": 1, "pending": 1, "completed": 0}


class TestTaskValidation:
    """Test cases for rejected task payloads."""

    @pytest.mark.parametrize("payload,message", [
        ({}, "Title is required"),
        ({"title": "   "}, "Title is required"),
        ({"title": "ab"}, "Title must be between 3 and 255 characters"),
        ({"title": "x" * 256}, "Title must be between 3 and 255 characters"),
        ({"title": "Fine", "description": "d" * 1001}, "Description must be at most 1000 characters"),
        ({"title": "Fine", "status": "Completed"}, "Invalid status. Use: pending or completed"),
    ])
    def test_invalid_create(self, client, ana, payload, message):
        headers, _ = ana

        response = client.post("/api/tasks", json=payload, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": message, "status": 400}

    @pytest.mark.parametrize("length", [3, 255])
    def test_title_length_bounds_accepted(self, client, ana, length):
        headers, _ = ana

        response = client.post("/api/tasks", json={"title": "x" * length}, headers=headers)

        assert response.status_code == 201

    def test_empty_update(self, client, ana):
        headers, _ = ana
        task = create_task(client, headers, title="Buy milk")

        response = client.put(f"/api/tasks/{task['id']}", json={}, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"] == "No data to update"

    def test_invalid_update_status(self, client, ana):
        headers, _ = ana
        task = create_task(client, headers, title="Buy milk")

        response = client.put(
            f"/api/tasks/{task['id']}", json={"status": "archived"}, headers=headers
        )

        assert response.status_code == 400

    def test_unknown_field(self, client, ana):
        headers, _ = ana

        response = client.post(
            "/api/tasks", json={"title": "Buy milk", "user_id": 99}, headers=headers
        )

        assert response.status_code == 400


class TestTaskQueries:
    """Test cases for filtering, search, pagination and stats."""

    @pytest.fixture(autouse=True)
    def seed(self, client, ana):
        headers, _ = ana
        for number in range(1, 13):
            create_task(client, headers, title=f"Task {number:02d}")
        create_task(client, headers, title="Buy milk", description="Oat", status="completed")
        create_task(client, headers, title="Groceries", description="eggs and MILK")
        self.headers = headers

    def test_list_newest_first(self, client):
        body = client.get("/api/tasks", headers=self.headers).json()

        assert body["count"] == 14
        assert [task["title"] for task in body["data"][:3]] == ["Groceries", "Buy milk", "Task 12"]
        assert "total" not in body

    def test_pagination(self, client):
        response = client.get("/api/tasks?page=2&limit=5", headers=self.headers)

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 14
        assert body["page"] == 2
        assert body["limit"] == 5
        assert [task["title"] for task in body["data"]] == [
            "Task 09", "Task 08", "Task 07", "Task 06", "Task 05"
        ]

    def test_default_page_size(self, client):
        body = client.get("/api/tasks?page=1", headers=self.headers).json()

        assert len(body["data"]) == 10
        assert body["limit"] == 10

    @pytest.mark.parametrize("query", [
        "limit=101",
        "limit=0",
        "page=0",
        "page=999999999999999999999",
        "page=999999999999999999999&limit=10",
    ])
    def test_invalid_pagination(self, client, query):
        response = client.get(f"/api/tasks?{query}", headers=self.headers)

        assert response.status_code == 400

    def test_filter_by_status_query(self, client):
        body = client.get("/api/tasks?status=completed", headers=self.headers).json()

        assert [task["title"] for task in body["data"]] == ["Buy milk"]

    def test_filter_by_status_path(self, client):
        body = client.get("/api/tasks/status/pending", headers=self.headers).json()

        assert body["count"] == 13

    def test_invalid_status_path(self, client):
        response = client.get("/api/tasks/status/done", headers=self.headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid status. Use: pending or completed"

    def test_search(self, client):
        body = client.get("/api/tasks/search?q=milk", headers=self.headers).json()

        assert {task["title"] for task in body["data"]} == {"Buy milk", "Groceries"}
        assert body["count"] == 2

    def test_search_requires_term(self, client):
        response = client.get("/api/tasks/search", headers=self.headers)

        assert response.status_code == 400
        assert response.json()["error"] == "A search term is required"

    def test_list_with_search_query(self, client):
        body = client.get("/api/tasks?q=MILK&page=1", headers=self.headers).json()

        assert body["total"] == 2

    def test_stats(self, client):
        response = client.get("/api/tasks/stats", headers=self.headers)

        assert response.json() == {
            "success": True,
            "data": {"total": 14, "pending": 13, "completed": 1},
        }
