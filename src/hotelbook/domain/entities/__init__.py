"""Domain entities."""

from hotelbook.domain.entities.permission import Permission
from hotelbook.domain.entities.role import Role
from hotelbook.domain.entities.role_permission import RolePermission

__all__ = [
    "Permission",
    "Role",
    "RolePermission",
]
