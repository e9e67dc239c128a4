"""Delete permission use case."""

import logging

from hotelbook.domain.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


class DeletePermissionUseCase:
    """Delete a permission that no role holds."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: int) -> None:
        async with self._uow_factory() as uow:
            if not await uow.permissions.get_by_id(permission_id):
                raise NotFound("Permission", permission_id)
            in_use = await uow.role_permissions.count_by_permission(permission_id)
            if in_use > 0:
                raise Conflict("Cannot delete permission assigned to roles")
            await uow.permissions.delete(permission_id)

        logger.info("Deleted permission %s", permission_id)
