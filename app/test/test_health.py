"""
Test Health Route

The health check must succeed without the database or AI provider, so it is
exercised here against an app whose lifespan never ran.
"""

from fastapi.testclient import TestClient
from app.main import app


def test_health_returns_ok_without_dependencies():
    """Test that /health answers OK without the lifespan having run."""
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"


def test_health_ignores_broken_dependencies(client, fake_collection):
    """Test that /health answers OK while the database is failing."""
    fake_collection.insert_one.side_effect = RuntimeError("database down")

    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"
