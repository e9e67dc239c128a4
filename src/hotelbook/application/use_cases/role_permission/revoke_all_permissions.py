"""Remove all permissions from role use case."""

import logging

from hotelbook.application.dto.role_permission_dto import BulkRemovalResult
from hotelbook.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RevokeAllPermissionsUseCase:
    """Remove every permission granted to a role. Removing zero is a success."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int) -> BulkRemovalResult:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            removed = await uow.role_permissions.delete_by_role(role_id)

        logger.info("Removed %d permissions from role %s", removed, role.name)
        return BulkRemovalResult(role_id=role_id, removed_count=removed)
