"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from hotelbook.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from hotelbook.application.ports.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from hotelbook.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def role_permissions(self) -> RolePermissionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
