"""Get role use case."""

from hotelbook.application.dto.role_dto import RoleDetail
from hotelbook.domain.exceptions import NotFound


class GetRoleUseCase:
    """Get role with its granted permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int) -> RoleDetail:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            permissions = await uow.role_permissions.list_permissions_for_role(role_id)
        return RoleDetail(role=role, permissions=permissions)
