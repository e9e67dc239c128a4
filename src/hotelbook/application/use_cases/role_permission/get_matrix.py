"""Role-permission matrix use case."""

from hotelbook.application.dto.role_permission_dto import (
    RolePermissionMatrix,
    RolePermissionMatrixRow,
)


class GetRolePermissionMatrixUseCase:
    """Project every role with its granted permissions, plus all permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> RolePermissionMatrix:
        """Build the matrix. Roles and permissions are sorted by name ascending."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
            permissions = await uow.permissions.list_all()
            assignments = await uow.role_permissions.list_all()

        roles = sorted(roles, key=lambda r: r.name)
        permissions = sorted(permissions, key=lambda p: p.name)

        granted: dict[int, set[int]] = {}
        for rp in assignments:
            granted.setdefault(rp.role_id, set()).add(rp.permission_id)

        rows = [
            RolePermissionMatrixRow(
                role=role,
                permissions=[p for p in permissions if p.id in granted.get(role.id, ())],
            )
            for role in roles
        ]
        return RolePermissionMatrix(rows=rows, all_permissions=permissions)
