"""
Tests for the FastAPI surface.

The lifespan is not entered; the adapter dependency is overridden with one
backed by the in-memory registry.
"""

import pytest
from fastapi.testclient import TestClient

import app as app_module
from tests.conftest import IDENTITY, PROFILE_ID


@pytest.fixture
def client(adapter):
    app_module.app.dependency_overrides[app_module.get_adapter] = lambda: adapter
    yield TestClient(app_module.app)
    app_module.app.dependency_overrides.clear()


class TestApp:
    """Tests for the HTTP endpoints."""

    def test_health_before_startup(self):
        response = TestClient(app_module.app).get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "initializing", "adapter_initialized": False}

    def test_notes_unavailable_before_startup(self):
        response = TestClient(app_module.app).get("/notes")

        assert response.status_code == 503

    def test_write_then_read(self, client):
        created = client.post(
            "/notes",
            json={
                "options": {"identity": IDENTITY},
                "input": {"title": "T", "body": {"content": "X", "mime_type": "text/markdown"}},
            },
        )

        assert created.status_code == 200
        assert created.json() == {"code": 0, "message": "Success", "data": 1}

        listed = client.get("/notes", params={"identity": IDENTITY})
        body = listed.json()

        assert listed.status_code == 200
        assert body["total"] == 1
        assert "cursor" not in body
        assert body["list"][0]["id"] == f"{PROFILE_ID}-1"
        assert body["list"][0]["body"]["content"] == "X"

        single = client.get("/notes", params={"identity": IDENTITY, "id": f"{PROFILE_ID}-1"})
        assert single.json()["total"] == 1

    def test_business_failure_is_200(self, client):
        response = client.post(
            "/notes",
            json={"options": {"identity": IDENTITY, "action": "remove"}, "input": {"id": "5-10"}},
        )

        assert response.status_code == 200
        assert response.json() == {"code": 1, "message": "Wrong id"}

    def test_validation_error_is_400(self, client):
        response = client.post(
            "/notes",
            json={
                "options": {"identity": IDENTITY},
                "input": {"related_urls": ["https://a.test", "https://b.test"]},
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Only one related_url is allowed"

    def test_unsupported_action_is_400(self, client):
        response = client.post(
            "/notes", json={"options": {"identity": IDENTITY, "action": "publish"}, "input": {}}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Unsupported action: publish"
