"""Role-permission membership check use case."""

from hotelbook.domain.exceptions import NotFound


class CheckRolePermissionUseCase:
    """Check whether a role currently holds a permission."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int, permission_id: int) -> bool:
        async with self._uow_factory() as uow:
            if not await uow.roles.get_by_id(role_id):
                raise NotFound("Role", role_id)
            if not await uow.permissions.get_by_id(permission_id):
                raise NotFound("Permission", permission_id)
            return await uow.role_permissions.get(role_id, permission_id) is not None
