"""Tests for task endpoints."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError


def _create_task(client, user_id, title="Buy milk", status="open", **extra):
    return client.post(
        "/api/v1/tasks",
        json={"user_id": user_id, "title": title, "status": status, **extra},
    )


class TestCreateTask:
    def test_create_task(self, client, user):
        response = _create_task(client, user.id)
        assert response.status_code == 201
        body = response.get_json()
        assert body["status"] == "success"
        task = body["data"]
        assert task["id"] is not None
        assert task["created_at"]
        assert task["user_id"] == user.id
        assert task["description"] == ""

    def test_create_task_unknown_user(self, client, db):
        response = _create_task(client, 999, title="x")
        assert response.status_code == 400
        assert response.get_json() == {"status": "error", "error": "User not found"}
        assert client.get("/api/v1/tasks").get_json()["data"] == []

    def test_create_task_invalid_json(self, client, db):
        response = client.post("/api/v1/tasks", data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid request body"

    def test_create_task_empty_title(self, client, user):
        response = _create_task(client, user.id, title="")
        assert response.status_code == 400
        body = response.get_json()
        assert body["status"] == "error"
        assert "title" in body["details"]
        assert client.get("/api/v1/tasks").get_json()["data"] == []

    def test_create_task_long_status(self, client, user):
        status = "waiting on the supplier to confirm the revised delivery date"
        response = _create_task(client, user.id, status=status)
        assert response.status_code == 201
        task_id = response.get_json()["data"]["id"]
        assert client.get(f"/api/v1/tasks/{task_id}").get_json()["data"]["status"] == status

    def test_create_task_missing_status(self, client, user):
        response = client.post("/api/v1/tasks", json={"user_id": user.id, "title": "t"})
        assert response.status_code == 400
        assert "status" in response.get_json()["details"]


class TestListTasks:
    def test_list_tasks_empty(self, client, db):
        response = client.get("/api/v1/tasks")
        assert response.status_code == 200
        assert response.get_json() == {"status": "success", "data": []}

    def test_list_tasks(self, client, user):
        _create_task(client, user.id, title="a")
        _create_task(client, user.id, title="b")
        titles = {task["title"] for task in client.get("/api/v1/tasks").get_json()["data"]}
        assert titles == {"a", "b"}

    def test_list_tasks_store_failure(self, client, db):
        with patch("tasktracker.store.Store.list_all_tasks", side_effect=SQLAlchemyError("boom")):
            response = client.get("/api/v1/tasks")
        assert response.status_code == 500
        body = response.get_json()
        assert body["status"] == "error"
        assert "boom" in body["error"]

    def test_list_tasks_by_user_id(self, client, user):
        _create_task(client, user.id)
        response = client.get(f"/api/v1/tasks/user/{user.id}")
        assert response.status_code == 200
        assert len(response.get_json()["data"]) == 1

    def test_list_tasks_by_user_id_without_tasks(self, client, db):
        response = client.get("/api/v1/tasks/user/42")
        assert response.status_code == 200
        assert response.get_json()["data"] == []

    def test_list_tasks_by_user_id_invalid(self, client, db):
        response = client.get("/api/v1/tasks/user/abc")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid user ID"

    def test_list_tasks_by_username(self, client, user):
        _create_task(client, user.id)
        response = client.get("/api/v1/tasks/username/alice")
        assert response.status_code == 200
        assert [task["title"] for task in response.get_json()["data"]] == ["Buy milk"]

    def test_list_tasks_by_unknown_username(self, client, db):
        response = client.get("/api/v1/tasks/username/ghost")
        assert response.status_code == 200
        assert response.get_json() == {"status": "success", "data": []}


class TestGetTask:
    def test_round_trip(self, client, user):
        created = _create_task(client, user.id, description="semi-skimmed").get_json()["data"]
        response = client.get(f"/api/v1/tasks/{created['id']}")
        assert response.status_code == 200
        assert response.get_json()["data"] == created

    def test_invalid_id(self, client, db):
        response = client.get("/api/v1/tasks/abc")
        assert response.status_code == 400
        assert response.get_json() == {"status": "error", "error": "Invalid task ID"}

    @pytest.mark.parametrize("raw", ["0_1", "%201", "99999999999999999999", "2147483648"])
    def test_malformed_or_out_of_range_id(self, client, user, raw):
        _create_task(client, user.id)
        response = client.get(f"/api/v1/tasks/{raw}")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid task ID"

    def test_out_of_range_id_on_delete(self, client, db):
        response = client.delete("/api/v1/tasks/99999999999999999999")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid task ID"

    def test_not_found(self, client, db):
        response = client.get("/api/v1/tasks/12345")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task not found"


class TestUpdateTask:
    def test_update_task(self, client, user):
        task_id = _create_task(client, user.id).get_json()["data"]["id"]
        response = client.put(
            f"/api/v1/tasks/{task_id}",
            json={"title": "Buy milk", "description": "2%", "status": "done"},
        )
        assert response.status_code == 200
        assert response.get_json() == {"status": "success", "message": "Task updated"}

        task = client.get(f"/api/v1/tasks/{task_id}").get_json()["data"]
        assert task["status"] == "done"
        assert task["description"] == "2%"

    def test_update_missing_fields(self, client, user):
        task_id = _create_task(client, user.id).get_json()["data"]["id"]
        response = client.put(f"/api/v1/tasks/{task_id}", json={"title": "t"})
        assert response.status_code == 400
        assert response.get_json()["error"] == "Title and status are required"

    def test_update_invalid_id(self, client, db):
        response = client.put("/api/v1/tasks/abc", json={"title": "t", "status": "open"})
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid task ID"

    def test_update_invalid_body(self, client, user):
        task_id = _create_task(client, user.id).get_json()["data"]["id"]
        response = client.put(f"/api/v1/tasks/{task_id}", data="oops", content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid request body"

    def test_update_not_found_leaves_store_unchanged(self, client, user):
        created = _create_task(client, user.id).get_json()["data"]
        response = client.put("/api/v1/tasks/999", json={"title": "t", "status": "done"})
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task not found"
        assert client.get("/api/v1/tasks").get_json()["data"] == [created]


class TestDeleteTask:
    def test_delete_then_get_is_not_found(self, client, user):
        task_id = _create_task(client, user.id).get_json()["data"]["id"]
        response = client.delete(f"/api/v1/tasks/{task_id}")
        assert response.status_code == 200
        assert response.get_json()["message"] == "Task deleted successfully"
        assert client.get(f"/api/v1/tasks/{task_id}").status_code == 404

    def test_delete_not_found(self, client, db):
        response = client.delete("/api/v1/tasks/999")
        assert response.status_code == 404

    def test_delete_invalid_id(self, client, db):
        response = client.delete("/api/v1/tasks/x")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid task ID"


def test_task_lifecycle(client, db):
    user = client.post("/api/v1/users", json={"username": "alice", "password": "pw"})
    assert user.get_json()["data"]["id"] == 1

    created = client.post(
        "/api/v1/tasks", json={"user_id": 1, "title": "Buy milk", "status": "open"}
    )
    assert created.status_code == 201
    task = created.get_json()["data"]
    assert task["id"] == 1
    assert task["created_at"]

    assert client.get("/api/v1/tasks/1").get_json()["data"] == task

    updated = client.put(
        "/api/v1/tasks/1", json={"title": "Buy milk", "description": "2%", "status": "done"}
    )
    assert updated.status_code == 200
    assert client.get("/api/v1/tasks/1").get_json()["data"]["status"] == "done"

    assert client.delete("/api/v1/tasks/1").status_code == 200
    assert client.get("/api/v1/tasks/1").status_code == 404
