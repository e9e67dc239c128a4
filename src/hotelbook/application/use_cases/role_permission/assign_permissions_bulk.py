"""Assign multiple permissions to role use case."""

import logging

from hotelbook.application.dto.role_permission_dto import BulkAssignmentResult
from hotelbook.domain.exceptions import Conflict, NotFound, ValidationError

logger = logging.getLogger(__name__)


class AssignPermissionsBulkUseCase:
    """Grant a batch of permissions to a role, skipping those already granted."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int, permission_ids: list[int]) -> BulkAssignmentResult:
        """Assign every requested permission the role does not have yet.

        The batch is rejected as a whole if any id does not resolve to a
        permission. Partial overlap with existing grants succeeds for the new
        subset; total overlap raises Conflict.
        """
        requested = list(dict.fromkeys(permission_ids))
        if not requested:
            raise ValidationError("At least one permission ID is required")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            found = await uow.permissions.list_by_ids(requested)
            if len(found) < len(requested):
                raise ValidationError("One or more permissions not found")

            already = set(
                await uow.role_permissions.list_permission_ids_for_role(role_id, requested)
            )
            new_ids = [pid for pid in requested if pid not in already]
            if not new_ids:
                raise Conflict("All permissions are already assigned to role")

            count = await uow.role_permissions.create_many(role_id, new_ids)

        logger.info(
            "Assigned %d permissions to role %s (%d already assigned)",
            count,
            role.name,
            len(already),
        )
        return BulkAssignmentResult(role_id=role_id, assigned_count=count)
