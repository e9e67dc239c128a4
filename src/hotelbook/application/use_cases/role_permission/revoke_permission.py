"""Remove permission from role use case."""

import logging

from hotelbook.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Remove a single permission from a role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int, permission_id: int) -> None:
        """Delete the pair. Not idempotent: a second call raises NotFound."""
        async with self._uow_factory() as uow:
            existing = await uow.role_permissions.get(role_id, permission_id)
            if not existing:
                raise NotFound(
                    "RolePermission",
                    f"{role_id}/{permission_id}",
                    "Permission not assigned to role",
                )
            await uow.role_permissions.delete(role_id, permission_id)

        logger.info("Removed permission %s from role %s", permission_id, role_id)
