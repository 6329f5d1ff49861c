"""
Tests for application assembly.
"""

from fastapi.testclient import TestClient

from pm_news_api.app.core.storage import MemStorage
from pm_news_api.app.main import create_app


def test_default_app_is_seeded():
    app = create_app()

    assert isinstance(app.state.storage, MemStorage)
    assert len(app.state.storage.news_items) == 6
    assert len(app.state.storage.pm_resources) == 5


def test_each_app_owns_its_store(storage):
    first = TestClient(create_app(storage=storage))
    second = TestClient(create_app(storage=MemStorage()))

    first.post(
        "/api/pm-resources",
        json={
            "title": "PRD template",
            "description": "Write requirements",
            "resourceType": "Template",
            "pmStage": "Planning",
            "tags": [],
            "difficulty": "Beginner",
        },
    )

    assert len(first.get("/api/pm-resources").json()) == 1
    assert second.get("/api/pm-resources").json() == []


def test_cors_headers_for_browser_clients(client):
    response = client.get("/api/news", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
