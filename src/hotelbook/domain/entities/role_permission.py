"""RolePermission entity - association between role and permission."""

from dataclasses import dataclass

from hotelbook.domain.entities.permission import Permission
from hotelbook.domain.entities.role import Role


@dataclass
class RolePermission:
    """Grant of a permission to a role. Identified by the (role_id, permission_id) pair."""

    role_id: int
    permission_id: int
    role: Role | None = None
    permission: Permission | None = None
