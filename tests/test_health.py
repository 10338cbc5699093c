"""Health endpoint tests."""

from unittest.mock import MagicMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from edugate.interfaces.api.resources.health import HealthResource


def _client(roles: list[str]) -> TestClient:
    cache = MagicMock()
    cache.roles.return_value = roles
    app = App()
    health = HealthResource(cache)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with a filled permission cache."""
    return _client(["Admin", "User"])


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 once roles are cached."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json == {"status": "ready", "roles": 2}


def test_health_not_ready_before_cache_refresh() -> None:
    result = _client([]).simulate_get("/v1/health/ready")
    assert result.status_code == 503
