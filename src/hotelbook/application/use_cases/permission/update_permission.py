"""Update permission use case."""

import logging

from hotelbook.application.dto.permission_dto import UNSET, PermissionUpdateInput
from hotelbook.domain.entities import Permission
from hotelbook.domain.exceptions import Conflict, NotFound, ValidationError

logger = logging.getLogger(__name__)


class UpdatePermissionUseCase:
    """Rename a permission and/or change its description."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: int, input_data: PermissionUpdateInput) -> Permission:
        name = input_data.name.strip() if input_data.name is not None else None
        if name is not None and not name:
            raise ValidationError("Permission name must not be empty")

        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission", permission_id)

            if name is not None and name != permission.name:
                other = await uow.permissions.get_by_name(name)
                if other and other.id != permission_id:
                    raise Conflict("Permission already exists")
                permission.name = name
            if input_data.description is not UNSET:
                permission.description = input_data.description

            updated = await uow.permissions.update(permission)

        logger.info("Updated permission %s", permission_id)
        return updated
