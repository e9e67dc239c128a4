"""PostgreSQL role-permission repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from hotelbook.domain.entities import Permission, Role, RolePermission
from hotelbook.domain.exceptions import Conflict


class PostgresRolePermissionRepository:
    """Role-permission association repository.

    Uniqueness of (role_id, permission_id) is enforced by the table's
    primary key; violations are raised as Conflict.
    """

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, role_id: int, permission_id: int) -> RolePermission | None:
        """Get the association for a role and permission."""
        cur = await self._conn.execute(
            "SELECT role_id, permission_id FROM role_permission "
            "WHERE role_id = %s AND permission_id = %s",
            (role_id, permission_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return RolePermission(role_id=r[0], permission_id=r[1])

    async def list_all(self) -> list[RolePermission]:
        """List every association."""
        cur = await self._conn.execute("SELECT role_id, permission_id FROM role_permission")
        rows = await cur.fetchall()
        return [RolePermission(role_id=r[0], permission_id=r[1]) for r in rows]

    async def list_permission_ids_for_role(
        self, role_id: int, permission_ids: list[int] | None = None
    ) -> list[int]:
        """List permission ids granted to role, optionally restricted to permission_ids."""
        if permission_ids is None:
            cur = await self._conn.execute(
                "SELECT permission_id FROM role_permission WHERE role_id = %s",
                (role_id,),
            )
        else:
            cur = await self._conn.execute(
                "SELECT permission_id FROM role_permission "
                "WHERE role_id = %s AND permission_id = ANY(%s)",
                (role_id, list(permission_ids)),
            )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def list_permissions_for_role(self, role_id: int) -> list[Permission]:
        """List permissions granted to role."""
        cur = await self._conn.execute(
            "SELECT p.id, p.name, p.description FROM permission p "
            "JOIN role_permission rp ON rp.permission_id = p.id "
            "WHERE rp.role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [Permission(id=r[0], name=r[1], description=r[2]) for r in rows]

    async def list_roles_for_permission(self, permission_id: int) -> list[Role]:
        """List roles holding permission, ordered by name."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name FROM role r "
            "JOIN role_permission rp ON rp.role_id = r.id "
            "WHERE rp.permission_id = %s ORDER BY r.name",
            (permission_id,),
        )
        rows = await cur.fetchall()
        return [Role(id=r[0], name=r[1]) for r in rows]

    async def create(self, role_id: int, permission_id: int) -> RolePermission:
        """Create association."""
        try:
            await self._conn.execute(
                "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                (role_id, permission_id),
            )
        except UniqueViolation as e:
            raise Conflict("Permission already assigned to role") from e
        return RolePermission(role_id=role_id, permission_id=permission_id)

    async def create_many(self, role_id: int, permission_ids: list[int]) -> int:
        """Create associations for role in a single statement. Returns rows inserted."""
        try:
            cur = await self._conn.execute(
                "INSERT INTO role_permission (role_id, permission_id) "
                "SELECT %s, unnest(%s::integer[])",
                (role_id, list(permission_ids)),
            )
        except UniqueViolation as e:
            raise Conflict("Permission already assigned to role") from e
        return cur.rowcount

    async def delete(self, role_id: int, permission_id: int) -> None:
        """Delete association."""
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s AND permission_id = %s",
            (role_id, permission_id),
        )

    async def delete_by_role(self, role_id: int) -> int:
        """Delete all associations of role. Returns rows deleted."""
        cur = await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s",
            (role_id,),
        )
        return cur.rowcount

    async def count_by_permission(self, permission_id: int) -> int:
        """Count roles holding permission."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM role_permission WHERE permission_id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def count_by_permissions(self, permission_ids: list[int]) -> dict[int, int]:
        """Count roles per permission for the given ids. Ids with no roles are omitted."""
        if not permission_ids:
            return {}
        cur = await self._conn.execute(
            "SELECT permission_id, count(*) FROM role_permission "
            "WHERE permission_id = ANY(%s) GROUP BY permission_id",
            (list(permission_ids),),
        )
        rows = await cur.fetchall()
        return {r[0]: r[1] for r in rows}
