"""Get role permissions use case."""

from hotelbook.domain.entities import Permission
from hotelbook.domain.exceptions import NotFound


class GetRolePermissionsUseCase:
    """List permissions currently granted to a role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int) -> list[Permission]:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            return await uow.role_permissions.list_permissions_for_role(role_id)
