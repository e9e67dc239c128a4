"""Pytest fixtures for hotelbook tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from hotelbook.domain.entities import Permission, Role, RolePermission
from hotelbook.domain.exceptions import Conflict


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, Role] = {}

    async def get_by_id(self, role_id: int) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name == name:
                return role
        return None

    async def list_all(self) -> list[Role]:
        # Insertion order; callers sort.
        return list(self._by_id.values())

    def add_role(self, role: Role) -> Role:
        """Helper to add role for tests."""
        self._by_id[role.id] = role
        return role


class FakePermissionRepository:
    """In-memory permission repository with serial ids."""

    def __init__(self) -> None:
        self._by_id: dict[int, Permission] = {}
        self._next_id = 1

    async def get_by_id(self, permission_id: int) -> Permission | None:
        return self._by_id.get(permission_id)

    async def get_by_name(self, name: str) -> Permission | None:
        for p in self._by_id.values():
            if p.name == name:
                return p
        return None

    async def list_by_ids(self, permission_ids: list[int]) -> list[Permission]:
        return [self._by_id[pid] for pid in set(permission_ids) if pid in self._by_id]

    async def list_all(self) -> list[Permission]:
        return list(self._by_id.values())

    async def list(self, *, offset: int = 0, limit: int = 10) -> list[Permission]:
        items = sorted(self._by_id.values(), key=lambda p: (p.name, p.id))
        return items[offset : offset + limit]

    async def count(self) -> int:
        return len(self._by_id)

    async def create(self, name: str, description: str | None = None) -> Permission:
        if await self.get_by_name(name):
            raise Conflict("Permission already exists")
        permission = Permission(id=self._next_id, name=name, description=description)
        self._by_id[permission.id] = permission
        self._next_id += 1
        return permission

    async def update(self, permission: Permission) -> Permission:
        self._by_id[permission.id] = permission
        return permission

    async def delete(self, permission_id: int) -> None:
        self._by_id.pop(permission_id, None)

    def add_permission(self, name: str, description: str | None = None) -> Permission:
        """Helper to add permission for tests."""
        permission = Permission(id=self._next_id, name=name, description=description)
        self._by_id[permission.id] = permission
        self._next_id += 1
        return permission


class FakeRolePermissionRepository:
    """In-memory role-permission repository; the pair set acts as the unique index."""

    def __init__(
        self, roles: FakeRoleRepository, permissions: FakePermissionRepository
    ) -> None:
        self._pairs: list[tuple[int, int]] = []
        self._roles = roles
        self._permissions = permissions

    async def get(self, role_id: int, permission_id: int) -> RolePermission | None:
        if (role_id, permission_id) in self._pairs:
            return RolePermission(role_id=role_id, permission_id=permission_id)
        return None

    async def list_all(self) -> list[RolePermission]:
        return [RolePermission(role_id=r, permission_id=p) for r, p in self._pairs]

    async def list_permission_ids_for_role(
        self, role_id: int, permission_ids: list[int] | None = None
    ) -> list[int]:
        return [
            p
            for r, p in self._pairs
            if r == role_id and (permission_ids is None or p in permission_ids)
        ]

    async def list_permissions_for_role(self, role_id: int) -> list[Permission]:
        return [self._permissions._by_id[p] for r, p in self._pairs if r == role_id]

    async def list_roles_for_permission(self, permission_id: int) -> list[Role]:
        roles = [self._roles._by_id[r] for r, p in self._pairs if p == permission_id]
        return sorted(roles, key=lambda r: r.name)

    async def create(self, role_id: int, permission_id: int) -> RolePermission:
        if (role_id, permission_id) in self._pairs:
            raise Conflict("Permission already assigned to role")
        self._pairs.append((role_id, permission_id))
        return RolePermission(role_id=role_id, permission_id=permission_id)

    async def create_many(self, role_id: int, permission_ids: list[int]) -> int:
        new_pairs = [(role_id, pid) for pid in permission_ids]
        if any(pair in self._pairs for pair in new_pairs):
            raise Conflict("Permission already assigned to role")
        self._pairs.extend(new_pairs)
        return len(new_pairs)

    async def delete(self, role_id: int, permission_id: int) -> None:
        self._pairs.remove((role_id, permission_id))

    async def delete_by_role(self, role_id: int) -> int:
        before = len(self._pairs)
        self._pairs = [(r, p) for r, p in self._pairs if r != role_id]
        return before - len(self._pairs)

    async def count_by_permission(self, permission_id: int) -> int:
        return sum(1 for _, p in self._pairs if p == permission_id)

    async def count_by_permissions(self, permission_ids: list[int]) -> dict[int, int]:
        counts: dict[int, int] = {}
        for _, p in self._pairs:
            if p in permission_ids:
                counts[p] = counts.get(p, 0) + 1
        return counts

    def add_pair(self, role_id: int, permission_id: int) -> None:
        """Helper to grant a permission directly for tests."""
        self._pairs.append((role_id, permission_id))


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.permissions = FakePermissionRepository()
        self.role_permissions = FakeRolePermissionRepository(self.roles, self.permissions)
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def seeded_uow() -> FakeUnitOfWork:
    """FakeUnitOfWork with the four seeded roles (ids 1-4)."""
    uow = FakeUnitOfWork()
    for role_id, name in enumerate(["ADMIN", "SUPERVISOR", "STAFF", "CUSTOMER"], start=1):
        uow.roles.add_role(Role(id=role_id, name=name))
    return uow


def make_factory(uow: FakeUnitOfWork):
    """Factory that yields the same uow on every call, so state survives use cases."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Seeded in-memory UnitOfWork for each test."""
    return seeded_uow()


@pytest.fixture
def uow_factory(uow: FakeUnitOfWork):
    """Factory returning async context manager around the test's uow."""
    return make_factory(uow)


@pytest.fixture
def permissions(uow: FakeUnitOfWork) -> list[Permission]:
    """Three permissions: bookings:read (1), hotels:manage (2), audit:read (3)."""
    return [
        uow.permissions.add_permission("bookings:read", "View bookings"),
        uow.permissions.add_permission("hotels:manage", "Manage hotels"),
        uow.permissions.add_permission("audit:read"),
    ]
