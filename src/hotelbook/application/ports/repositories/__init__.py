"""Repository ports."""

from hotelbook.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from hotelbook.application.ports.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from hotelbook.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "PermissionRepository",
    "RolePermissionRepository",
    "RoleRepository",
]
