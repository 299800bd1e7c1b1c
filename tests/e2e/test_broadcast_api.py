"""End-to-end tests for broadcast info, comments and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from tbn.interface.api.app import create_app
from tbn.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestBroadcastEndpoints:
    """End-to-end tests for /api/tbn."""

    def test_list_regions(self, client):
        response = client.get("/api/tbn/regions")

        assert response.status_code == 200
        regions = response.json()
        assert regions["2"] == "부산"
        assert regions["14"] == "충남"

    def test_get_broadcast_info(self, client):
        response = client.get("/api/tbn/broadcast/3")

        assert response.status_code == 200
        assert response.json() == {
            "title": "출발 서울대행진",
            "mc": "홍길동",
            "time": "07:00 ~ 09:00",
            "region_code": "3",
            "region_name": "광주",
        }

    def test_unknown_region_still_answers(self, client):
        response = client.get("/api/tbn/broadcast/404")

        assert response.status_code == 200
        assert response.json()["region_name"] == "알수없음"


class TestCommentEndpoints:
    """End-to-end tests for /api/comments."""

    def _token(self, client) -> str:
        response = client.post(
            "/api/auth/google", json={"id_token": "mock:g-9:fan@gmail.com:팬"}
        )
        return response.json()["token"]

    def test_create_and_list_comments(self, client):
        token = self._token(client)
        headers = {"Authorization": f"Bearer {token}"}

        first = client.post("/api/comments/6", json={"text": "1"}, headers=headers)
        client.post("/api/comments/6", json={"text": "2"}, headers=headers)
        client.post("/api/comments/7", json={"text": "other"}, headers=headers)

        assert first.status_code == 201
        assert first.json()["author_nickname"] == "팬"

        response = client.get("/api/comments/6")
        assert response.status_code == 200
        texts = {c["text"] for c in response.json()["comments"]}
        assert texts == {"1", "2"}

        response = client.get("/api/comments/6", params={"limit": 1})
        assert len(response.json()["comments"]) == 1

    def test_create_comment_requires_auth(self, client):
        response = client.post("/api/comments/6", json={"text": "hi"})

        assert response.status_code == 401

    def test_create_comment_invalid_token_returns_401(self, client):
        response = client.post(
            "/api/comments/6",
            json={"text": "hi"},
            headers={"Authorization": "Bearer expired"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to create comments"

    def test_empty_comment_returns_422(self, client):
        token = self._token(client)

        response = client.post(
            "/api/comments/6",
            json={"text": ""},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 422

    def test_limit_out_of_range_returns_422(self, client):
        response = client.get("/api/comments/6", params={"limit": 500})

        assert response.status_code == 422


class TestHealth:
    """End-to-end tests for /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
