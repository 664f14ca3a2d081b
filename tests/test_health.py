"""Tests for health check endpoints and request middleware."""

import pytest
from fastapi.testclient import TestClient

from lookbook.infrastructure.config import settings
from lookbook.main import app


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """Create test client serving the bundled sample catalog."""
    monkeypatch.setattr(settings, "catalog_backend", "memory")
    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "lookbook-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint returns ready status."""
    response = client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["backend"] == "memory"


def test_generates_request_id_if_not_provided(client: TestClient) -> None:
    """Should generate a UUID request ID if not in request headers."""
    response = client.get("/health")
    assert len(response.headers["X-Request-ID"]) == 36


def test_uses_provided_request_id(client: TestClient) -> None:
    """Should echo the request ID from request headers."""
    response = client.get("/health", headers={"X-Request-ID": "custom-request-id-12345"})
    assert response.headers["X-Request-ID"] == "custom-request-id-12345"


def test_error_body_carries_request_id(client: TestClient) -> None:
    """Error responses include the correlation ID."""
    response = client.get("/products/prod_404", headers={"X-Request-ID": "req-404"})
    assert response.status_code == 404
    assert response.json()["request_id"] == "req-404"


def test_memory_backend_serves_sample_catalog(client: TestClient) -> None:
    """With the memory backend the default dependencies serve sample data."""
    response = client.get("/products", params={"limit": "2"})
    assert response.status_code == 200
    assert response.json()["pagination"]["total"] == 6
