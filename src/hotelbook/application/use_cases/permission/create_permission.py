"""Create permission use case."""

import logging

from hotelbook.application.dto.permission_dto import PermissionCreateInput
from hotelbook.domain.entities import Permission
from hotelbook.domain.exceptions import Conflict, ValidationError

logger = logging.getLogger(__name__)


class CreatePermissionUseCase:
    """Create a permission with a unique name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, input_data: PermissionCreateInput) -> Permission:
        name = (input_data.name or "").strip()
        if not name:
            raise ValidationError("Permission name is required")

        async with self._uow_factory() as uow:
            if await uow.permissions.get_by_name(name):
                raise Conflict("Permission already exists")
            permission = await uow.permissions.create(name, input_data.description)

        logger.info("Created permission %s (id=%s)", permission.name, permission.id)
        return permission
