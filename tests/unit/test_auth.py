"""Unit tests for bearer-token auth middleware and settings."""

import pytest
from falcon.testing import TestClient

from hotelbook.config import Settings
from keycloak.exceptions import KeycloakError

from hotelbook.infrastructure.auth.keycloak_provider import KeycloakProvider, OIDCUser
from hotelbook.interfaces.api.app import create_app
from hotelbook.interfaces.api.middleware.auth import AuthMiddleware

from tests.conftest import make_factory, seeded_uow

TOKENS = {
    "admin-token": OIDCUser("u1", "a@example.com", "alice", ["SUPERVISOR"]),
    "staff-token": OIDCUser("u2", None, "bob", ["STAFF"]),
}


class FakeKeycloakProvider:
    """Resolves a fixed set of tokens; anything else is rejected."""

    async def decode_token(self, token: str) -> OIDCUser | None:
        return TOKENS.get(token)


@pytest.fixture
def client() -> TestClient:
    auth = AuthMiddleware(FakeKeycloakProvider(), admin_roles=frozenset({"ADMIN", "SUPERVISOR"}))
    return TestClient(create_app(make_factory(seeded_uow()), middleware=[auth]))


@pytest.mark.parametrize(
    ("headers", "status"),
    [
        ({}, 401),
        ({"Authorization": "Basic abc"}, 401),
        ({"Authorization": "Bearer unknown"}, 401),
        ({"Authorization": "Bearer staff-token"}, 403),
        ({"Authorization": "Bearer admin-token"}, 200),
    ],
)
def test_matrix_access_by_token(client: TestClient, headers: dict, status: int) -> None:
    result = client.simulate_get("/v1/role-permissions", headers=headers)
    assert result.status_code == status


def test_middleware_without_provider_leaves_user_unset() -> None:
    client = TestClient(create_app(make_factory(seeded_uow()), middleware=[AuthMiddleware()]))

    result = client.simulate_get("/v1/roles", headers={"Authorization": "Bearer admin-token"})

    assert result.status_code == 401


def test_settings_split_lists() -> None:
    settings = Settings(
        admin_roles="ADMIN, SUPERVISOR,,",
        cors_origins="http://a.example, http://b.example",
    )

    assert settings.admin_role_set == frozenset({"ADMIN", "SUPERVISOR"})
    assert settings.cors_origin_list == ["http://a.example", "http://b.example"]


class StubKeycloakOpenID:
    """Async introspection returning a fixed payload or raising."""

    def __init__(self, payload: dict | None = None, error: Exception | None = None) -> None:
        self._payload = payload
        self._error = error

    async def a_introspect(self, token: str) -> dict:
        if self._error:
            raise self._error
        return self._payload


def _provider(stub: StubKeycloakOpenID) -> KeycloakProvider:
    provider = KeycloakProvider("http://keycloak.example", "hotelbook", "hotelbook-api")
    provider._keycloak = stub
    return provider


@pytest.mark.asyncio
async def test_decode_token_active() -> None:
    provider = _provider(
        StubKeycloakOpenID(
            {
                "active": True,
                "sub": "u1",
                "preferred_username": "alice",
                "realm_access": {"roles": ["ADMIN"]},
            }
        )
    )

    user = await provider.decode_token("t")

    assert user == OIDCUser("u1", None, "alice", ["ADMIN"])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "stub",
    [
        StubKeycloakOpenID({"active": False}),
        StubKeycloakOpenID(error=KeycloakError("connection refused")),
    ],
)
async def test_decode_token_rejected(stub: StubKeycloakOpenID) -> None:
    assert await _provider(stub).decode_token("t") is None
