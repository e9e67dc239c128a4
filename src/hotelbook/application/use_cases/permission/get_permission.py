"""Get permission use case."""

from hotelbook.application.dto.permission_dto import PermissionDetail
from hotelbook.domain.exceptions import NotFound


class GetPermissionUseCase:
    """Get permission with the roles it is granted to."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: int) -> PermissionDetail:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission", permission_id)
            roles = await uow.role_permissions.list_roles_for_permission(permission_id)
        return PermissionDetail(permission=permission, roles=roles)
