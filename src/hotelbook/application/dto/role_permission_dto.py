"""Role-permission DTOs."""

from dataclasses import dataclass, field

from hotelbook.domain.entities import Permission, Role


@dataclass
class BulkAssignmentResult:
    """Outcome of assigning several permissions to a role."""

    role_id: int
    assigned_count: int


@dataclass
class BulkRemovalResult:
    """Outcome of removing every permission from a role."""

    role_id: int
    removed_count: int


@dataclass
class RolePermissionMatrixRow:
    """One role and the permissions currently granted to it."""

    role: Role
    permissions: list[Permission] = field(default_factory=list)

    @property
    def permission_ids(self) -> list[int]:
        return [p.id for p in self.permissions]


@dataclass
class RolePermissionMatrix:
    """Full role x permission grid: rows by role name, columns by permission name."""

    rows: list[RolePermissionMatrixRow]
    all_permissions: list[Permission]
