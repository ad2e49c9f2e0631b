"""
Tests for the student roster HTTP routes.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from roster.adapters.memory_storage import InMemoryKeyValueStore
from roster.api import deps
from roster.api.routes import students
from roster.components.students import RosterStore

JANE = {"name": "Jane Doe", "id": "1001", "email": "jane@x.com", "contact": "9876543210"}


# --- Test Setup ---


@pytest.fixture
def app(roster_store: RosterStore) -> FastAPI:
    """Test FastAPI app with student routes over in-memory storage."""
    app = FastAPI()
    app.include_router(students.router, prefix="/api/students")
    app.dependency_overrides[deps.get_roster_store] = lambda: roster_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def create(client: TestClient, **overrides: str) -> dict:
    response = client.post("/api/students", json={**JANE, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["student"]


# --- CRUD ---


class TestCreate:
    def test_create_returns_record(self, client: TestClient) -> None:
        response = client.post("/api/students", json={**JANE, "name": " Jane Doe "})

        assert response.status_code == 201
        body = response.json()
        assert body["notice"] == "Student added successfully!"
        assert body["student"]["name"] == "Jane Doe"
        assert body["student"]["uniqueId"] == "1700000000000"

    def test_create_invalid_returns_field_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/students", json={"name": "", "id": "1001", "email": "x", "contact": "12"}
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert {d["field"]: d["code"] for d in detail} == {
            "name": "required",
            "email": "invalid_format",
            "contact": "too_short",
        }
        assert client.get("/api/students").json()["total"] == 0


class TestListAndGet:
    def test_list_in_insertion_order(self, client: TestClient, fixed_clock) -> None:
        first = create(client, name="Ann Lee")
        fixed_clock.advance()
        second = create(client, name="Bob Ray")

        body = client.get("/api/students").json()

        assert body["total"] == 2
        assert [s["uniqueId"] for s in body["items"]] == [first["uniqueId"], second["uniqueId"]]

    def test_get_one(self, client: TestClient) -> None:
        student = create(client)
        response = client.get(f"/api/students/{student['uniqueId']}")
        assert response.status_code == 200
        assert response.json() == student

    def test_get_missing(self, client: TestClient) -> None:
        response = client.get("/api/students/missing")
        assert response.status_code == 404
        assert response.json()["detail"][0]["code"] == "student_not_found"


class TestUpdate:
    def test_update(self, client: TestClient) -> None:
        student = create(client)

        response = client.put(
            f"/api/students/{student['uniqueId']}", json={**JANE, "name": "Jane Smith"}
        )

        assert response.status_code == 200
        assert response.json()["student"] == {**student, "name": "Jane Smith"}

    def test_update_missing_is_404(self, client: TestClient) -> None:
        response = client.put("/api/students/missing", json=JANE)
        assert response.status_code == 404

    def test_update_invalid_is_400(self, client: TestClient) -> None:
        student = create(client)
        response = client.put(
            f"/api/students/{student['uniqueId']}", json={**JANE, "contact": "12ab"}
        )
        assert response.status_code == 400
        assert response.json()["detail"][0]["field"] == "contact"


class TestDelete:
    def test_delete_is_idempotent(self, client: TestClient) -> None:
        student = create(client)
        url = f"/api/students/{student['uniqueId']}"

        first = client.delete(url)
        second = client.delete(url)

        assert first.json() == {"deleted": True, "notice": "Student deleted successfully!"}
        assert second.status_code == 200
        assert second.json() == {"deleted": False, "notice": ""}


# --- Validation ---


def test_validate_does_not_save(client: TestClient) -> None:
    response = client.post("/api/students/validate", json={**JANE, "id": " 1001"})

    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["fields"]["id"] == {
        "valid": False,
        "reason": "invalid_format",
        "message": "Student ID should contain only numbers",
    }
    assert body["fields"]["name"]["valid"] is True
    assert client.get("/api/students").json()["total"] == 0


# --- Storage failures ---


class TestStorageFailures:
    def test_unavailable_is_503(self, app: FastAPI, fixed_clock) -> None:
        storage = InMemoryKeyValueStore(enabled=False)
        app.dependency_overrides[deps.get_roster_store] = lambda: RosterStore(
            storage, clock=fixed_clock
        )
        response = TestClient(app).get("/api/students")

        assert response.status_code == 503
        assert response.json()["detail"][0]["code"] == "storage_unavailable"

    def test_corrupt_is_500(self, client: TestClient, memory_storage) -> None:
        memory_storage.set_item("students", "{broken")
        response = client.post("/api/students", json=JANE)

        assert response.status_code == 500
        assert response.json()["detail"][0]["code"] == "storage_corrupt"


# --- Application wiring ---


@pytest.fixture
def configured_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    config = tmp_path / "roster.yaml"
    config.write_text("storage:\n  backend: memory\n")
    monkeypatch.setenv("ROSTER_CONFIG", str(config))
    deps.get_config.cache_clear()
    deps.get_storage.cache_clear()

    from roster.api.main import app

    yield app

    deps.get_config.cache_clear()
    deps.get_storage.cache_clear()


def test_app_health_and_shared_storage(configured_app) -> None:
    with TestClient(configured_app) as client:
        assert client.get("/health").json() == {"status": "ok", "storage_backend": "memory"}

        created = client.post("/api/students", json=JANE)
        assert created.status_code == 201

        listed = client.get("/api/students").json()
        assert listed["total"] == 1


def test_app_sends_no_cross_origin_headers(configured_app) -> None:
    with TestClient(configured_app) as client:
        response = client.get("/health", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
