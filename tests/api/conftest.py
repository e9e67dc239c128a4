"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from hotelbook.domain.entities import Permission
from hotelbook.interfaces.api.app import create_app
from hotelbook.interfaces.api.middleware.auth import RequestUser

from tests.conftest import FakeUnitOfWork, make_factory


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing; None means anonymous."""

    def __init__(self, user: RequestUser | None) -> None:
        self._user = user

    async def process_request(self, req, resp):
        req.context.user = self._user


ADMIN_USER = RequestUser(user_id="admin-1", roles=["ADMIN"], is_admin=True)
STAFF_USER = RequestUser(user_id="staff-1", roles=["STAFF"], is_admin=False)


def _client(uow: FakeUnitOfWork, user: RequestUser | None) -> TestClient:
    app = create_app(make_factory(uow), middleware=[AuthBypassMiddleware(user)])
    return TestClient(app)


@pytest.fixture
def client(uow: FakeUnitOfWork) -> TestClient:
    """Test client authenticated as an admin."""
    return _client(uow, ADMIN_USER)


@pytest.fixture
def staff_client(uow: FakeUnitOfWork) -> TestClient:
    """Test client authenticated as a non-admin user."""
    return _client(uow, STAFF_USER)


@pytest.fixture
def anonymous_client(uow: FakeUnitOfWork) -> TestClient:
    """Test client without a user."""
    return _client(uow, None)


@pytest.fixture
def seeded_permissions(uow: FakeUnitOfWork) -> list[Permission]:
    return [
        uow.permissions.add_permission("bookings:read", "View bookings"),
        uow.permissions.add_permission("hotels:manage", "Manage hotels"),
    ]
