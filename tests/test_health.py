"""Health endpoint tests."""

from contextlib import asynccontextmanager

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from hotelbook.interfaces.api.resources.health import HealthResource

from tests.conftest import make_factory, seeded_uow


def _client(unit_of_work_factory) -> TestClient:
    app = App()
    health = HealthResource(unit_of_work_factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    return _client(make_factory(seeded_uow()))


@pytest.fixture
def db_down_client() -> TestClient:
    """Factory whose connection attempt fails."""

    @asynccontextmanager
    async def _factory():
        raise OSError("connection refused")
        yield

    return _client(_factory)


def test_health_liveness(client: TestClient) -> None:
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_not_ready_when_database_unreachable(db_down_client: TestClient) -> None:
    """Liveness stays up; readiness reports 503."""
    assert db_down_client.simulate_get("/v1/health").status_code == 200

    result = db_down_client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
