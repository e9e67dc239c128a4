"""PostgreSQL permission repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import ForeignKeyViolation, UniqueViolation

from hotelbook.domain.entities import Permission
from hotelbook.domain.exceptions import Conflict

_COLUMNS = "id, name, description"


def _row_to_permission(r: tuple) -> Permission:
    return Permission(id=r[0], name=r[1], description=r[2])


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: int) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by unique name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def list_by_ids(self, permission_ids: list[int]) -> list[Permission]:
        """List permissions whose id is in permission_ids."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE id = ANY(%s)",
            (list(permission_ids),),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def list_all(self) -> list[Permission]:
        """List all permissions ordered by name."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM permission ORDER BY name")
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def list(self, *, offset: int = 0, limit: int = 10) -> list[Permission]:
        """List one page of permissions ordered by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission ORDER BY name, id OFFSET %s LIMIT %s",
            (offset, limit),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def count(self) -> int:
        """Count permissions."""
        cur = await self._conn.execute("SELECT count(*) FROM permission")
        r = await cur.fetchone()
        return r[0]

    async def create(self, name: str, description: str | None = None) -> Permission:
        """Create permission; id is assigned by the database."""
        try:
            cur = await self._conn.execute(
                f"INSERT INTO permission (name, description) VALUES (%s, %s) RETURNING {_COLUMNS}",
                (name, description),
            )
        except UniqueViolation as e:
            raise Conflict("Permission already exists") from e
        r = await cur.fetchone()
        return _row_to_permission(r)

    async def update(self, permission: Permission) -> Permission:
        """Update permission name and description."""
        try:
            await self._conn.execute(
                "UPDATE permission SET name = %s, description = %s WHERE id = %s",
                (permission.name, permission.description, permission.id),
            )
        except UniqueViolation as e:
            raise Conflict("Permission already exists") from e
        return permission

    async def delete(self, permission_id: int) -> None:
        """Delete permission; a grant still referencing it raises Conflict."""
        try:
            await self._conn.execute(
                "DELETE FROM permission WHERE id = %s",
                (permission_id,),
            )
        except ForeignKeyViolation as e:
            raise Conflict("Cannot delete permission assigned to roles") from e
