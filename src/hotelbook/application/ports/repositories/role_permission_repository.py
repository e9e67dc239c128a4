"""RolePermission repository port."""

from typing import Protocol

from hotelbook.domain.entities import Permission, Role, RolePermission


class RolePermissionRepository(Protocol):
    """Port for role-permission association persistence.

    Implementations must enforce uniqueness of (role_id, permission_id) and
    raise Conflict when an insert would violate it.
    """

    async def get(self, role_id: int, permission_id: int) -> RolePermission | None: ...

    async def list_all(self) -> list[RolePermission]: ...

    async def list_permission_ids_for_role(
        self, role_id: int, permission_ids: list[int] | None = None
    ) -> list[int]: ...

    async def list_permissions_for_role(self, role_id: int) -> list[Permission]: ...

    async def list_roles_for_permission(self, permission_id: int) -> list[Role]: ...

    async def create(self, role_id: int, permission_id: int) -> RolePermission: ...

    async def create_many(self, role_id: int, permission_ids: list[int]) -> int: ...

    async def delete(self, role_id: int, permission_id: int) -> None: ...

    async def delete_by_role(self, role_id: int) -> int: ...

    async def count_by_permission(self, permission_id: int) -> int: ...

    async def count_by_permissions(self, permission_ids: list[int]) -> dict[int, int]: ...
