"""Unit tests for postgres repositories against a stub connection."""

import pytest
from psycopg.errors import ForeignKeyViolation, UniqueViolation

from hotelbook.domain.entities import Permission
from hotelbook.domain.exceptions import Conflict
from hotelbook.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from hotelbook.infrastructure.persistence.postgres.role_permission_repository import (
    PostgresRolePermissionRepository,
)


class _Cursor:
    def __init__(self, rowcount: int = 0) -> None:
        self.rowcount = rowcount


class StubConnection:
    """Records statements; raises `error` from execute when set."""

    def __init__(self, error: Exception | None = None, rowcount: int = 0) -> None:
        self.error = error
        self.rowcount = rowcount
        self.statements: list[tuple[str, tuple]] = []

    async def execute(self, query: str, params: tuple = ()) -> _Cursor:
        self.statements.append((query, params))
        if self.error:
            raise self.error
        return _Cursor(self.rowcount)


class TestRolePermissionRepositoryConstraints:
    """Unique-index rejections on role_permission become Conflict."""

    @pytest.mark.asyncio
    async def test_create_duplicate_pair(self) -> None:
        repo = PostgresRolePermissionRepository(StubConnection(UniqueViolation("duplicate key")))

        with pytest.raises(Conflict, match="already assigned"):
            await repo.create(3, 1)

    @pytest.mark.asyncio
    async def test_create_many_duplicate_pair(self) -> None:
        repo = PostgresRolePermissionRepository(StubConnection(UniqueViolation("duplicate key")))

        with pytest.raises(Conflict):
            await repo.create_many(3, [1, 2])

    @pytest.mark.asyncio
    async def test_create_many_single_statement(self) -> None:
        conn = StubConnection(rowcount=2)
        repo = PostgresRolePermissionRepository(conn)

        assert await repo.create_many(3, [1, 2]) == 2
        assert len(conn.statements) == 1
        query, params = conn.statements[0]
        assert "unnest(%s::integer[])" in query
        assert params == (3, [1, 2])

    @pytest.mark.asyncio
    async def test_count_by_permissions_empty_skips_query(self) -> None:
        conn = StubConnection()

        assert await PostgresRolePermissionRepository(conn).count_by_permissions([]) == {}
        assert conn.statements == []


class TestPermissionRepositoryConstraints:
    """Unique and foreign-key rejections on permission become Conflict."""

    @pytest.mark.asyncio
    async def test_create_duplicate_name(self) -> None:
        repo = PostgresPermissionRepository(StubConnection(UniqueViolation("duplicate key")))

        with pytest.raises(Conflict, match="already exists"):
            await repo.create("audit:read")

    @pytest.mark.asyncio
    async def test_update_onto_existing_name(self) -> None:
        repo = PostgresPermissionRepository(StubConnection(UniqueViolation("duplicate key")))

        with pytest.raises(Conflict, match="already exists"):
            await repo.update(Permission(id=3, name="bookings:read"))

    @pytest.mark.asyncio
    async def test_delete_still_referenced(self) -> None:
        """A grant inserted after the in-use count check is still reported as Conflict."""
        repo = PostgresPermissionRepository(StubConnection(ForeignKeyViolation("still referenced")))

        with pytest.raises(Conflict, match="assigned to roles"):
            await repo.delete(1)
