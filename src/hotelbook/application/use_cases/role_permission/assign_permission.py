"""Assign permission to role use case."""

import logging

from hotelbook.domain.entities import RolePermission
from hotelbook.domain.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


class AssignPermissionUseCase:
    """Grant a single permission to a role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int, permission_id: int) -> RolePermission:
        """Create the role-permission pair and return it joined with role and permission.

        Raises NotFound naming the missing entity, or Conflict if the pair
        already exists. A concurrent insert of the same pair is rejected by
        the repository's unique constraint and also surfaces as Conflict.
        """
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission", permission_id)

            existing = await uow.role_permissions.get(role_id, permission_id)
            if existing:
                raise Conflict("Permission already assigned to role")

            assignment = await uow.role_permissions.create(role_id, permission_id)
            assignment.role = role
            assignment.permission = permission

        logger.info("Assigned permission %s to role %s", permission.name, role.name)
        return assignment
