"""Permission repository port."""

from typing import Protocol

from hotelbook.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission persistence."""

    async def get_by_id(self, permission_id: int) -> Permission | None: ...

    async def get_by_name(self, name: str) -> Permission | None: ...

    async def list_by_ids(self, permission_ids: list[int]) -> list[Permission]: ...

    async def list_all(self) -> list[Permission]: ...

    async def list(self, *, offset: int = 0, limit: int = 10) -> list[Permission]: ...

    async def count(self) -> int: ...

    async def create(self, name: str, description: str | None = None) -> Permission: ...

    async def update(self, permission: Permission) -> Permission: ...

    async def delete(self, permission_id: int) -> None: ...
