"""Role-permission API resources."""

import falcon
import falcon.asgi

from hotelbook.application.dto.role_permission_dto import RolePermissionMatrix
from hotelbook.application.use_cases.role_permission.assign_permission import (
    AssignPermissionUseCase,
)
from hotelbook.application.use_cases.role_permission.assign_permissions_bulk import (
    AssignPermissionsBulkUseCase,
)
from hotelbook.application.use_cases.role_permission.check_role_permission import (
    CheckRolePermissionUseCase,
)
from hotelbook.application.use_cases.role_permission.get_matrix import (
    GetRolePermissionMatrixUseCase,
)
from hotelbook.application.use_cases.role_permission.get_role_permissions import (
    GetRolePermissionsUseCase,
)
from hotelbook.application.use_cases.role_permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from hotelbook.application.use_cases.role_permission.revoke_permission import (
    RevokePermissionUseCase,
)
from hotelbook.domain.entities import RolePermission
from hotelbook.domain.exceptions import ValidationError
from hotelbook.interfaces.api.middleware.auth import require_admin
from hotelbook.interfaces.api.resources.params import (
    get_json_object,
    parse_id,
    parse_id_list,
)
from hotelbook.interfaces.api.resources.serializers import (
    permission_to_dict,
    role_to_dict,
)


def _matrix_to_dict(matrix: RolePermissionMatrix) -> dict:
    return {
        "matrix": [
            {
                "role": role_to_dict(row.role),
                "permissions": [permission_to_dict(p) for p in row.permissions],
                "permission_ids": row.permission_ids,
            }
            for row in matrix.rows
        ],
        "all_permissions": [permission_to_dict(p) for p in matrix.all_permissions],
    }


def _assignment_to_dict(assignment: RolePermission) -> dict:
    return {
        "role_id": assignment.role_id,
        "permission_id": assignment.permission_id,
        "role": role_to_dict(assignment.role) if assignment.role else None,
        "permission": (
            permission_to_dict(assignment.permission) if assignment.permission else None
        ),
    }


@falcon.before(require_admin)
class RolePermissionsResource:
    """GET/POST /v1/role-permissions, GET /v1/role-permissions/matrix."""

    def __init__(
        self,
        get_matrix: GetRolePermissionMatrixUseCase,
        assign_permission: AssignPermissionUseCase,
    ) -> None:
        self._get_matrix = get_matrix
        self._assign = assign_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Role x permission matrix."""
        matrix = await self._get_matrix.execute()
        resp.media = _matrix_to_dict(matrix)
        resp.status = falcon.HTTP_200

    async def on_get_matrix(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self.on_get(req, resp)

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Assign permission to role from body {role_id, permission_id}."""
        body = await get_json_object(req)
        if body.get("role_id") is None or body.get("permission_id") is None:
            raise ValidationError("Role ID and Permission ID are required")
        role_id = parse_id(body["role_id"], "role")
        permission_id = parse_id(body["permission_id"], "permission")

        assignment = await self._assign.execute(role_id, permission_id)
        resp.media = _assignment_to_dict(assignment)
        resp.status = falcon.HTTP_201


@falcon.before(require_admin)
class RolePermissionsByRoleResource:
    """GET /v1/role-permissions/role/{role_id} - permissions granted to role."""

    def __init__(self, get_role_permissions: GetRolePermissionsUseCase) -> None:
        self._get_role_permissions = get_role_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        permissions = await self._get_role_permissions.execute(parse_id(role_id, "role"))
        resp.media = {"items": [permission_to_dict(p) for p in permissions]}
        resp.status = falcon.HTTP_200


@falcon.before(require_admin)
class RolePermissionAssignmentResource:
    """GET/POST/DELETE /v1/role-permissions/role/{role_id}/permission/{permission_id}."""

    def __init__(
        self,
        check_role_permission: CheckRolePermissionUseCase,
        assign_permission: AssignPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        self._check = check_role_permission
        self._assign = assign_permission
        self._revoke = revoke_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
        permission_id: str,
    ) -> None:
        """Whether role holds permission."""
        rid = parse_id(role_id, "role")
        pid = parse_id(permission_id, "permission")
        assigned = await self._check.execute(rid, pid)
        resp.media = {"role_id": rid, "permission_id": pid, "assigned": assigned}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
        permission_id: str,
    ) -> None:
        """Assign permission to role."""
        assignment = await self._assign.execute(
            parse_id(role_id, "role"), parse_id(permission_id, "permission")
        )
        resp.media = _assignment_to_dict(assignment)
        resp.status = falcon.HTTP_201

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
        permission_id: str,
    ) -> None:
        """Remove permission from role."""
        await self._revoke.execute(
            parse_id(role_id, "role"), parse_id(permission_id, "permission")
        )
        resp.status = falcon.HTTP_204


@falcon.before(require_admin)
class RolePermissionsBulkResource:
    """POST/DELETE /v1/role-permissions/role/{role_id}/permissions."""

    def __init__(
        self,
        assign_permissions_bulk: AssignPermissionsBulkUseCase,
        revoke_all_permissions: RevokeAllPermissionsUseCase,
    ) -> None:
        self._assign_bulk = assign_permissions_bulk
        self._revoke_all = revoke_all_permissions

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Assign permissions from body {permission_ids: [int]}."""
        rid = parse_id(role_id, "role")
        body = await get_json_object(req)
        permission_ids = parse_id_list(body.get("permission_ids"), "permission_ids")

        result = await self._assign_bulk.execute(rid, permission_ids)
        resp.media = {
            "message": f"{result.assigned_count} permissions assigned to role successfully",
            "assigned_count": result.assigned_count,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Remove all permissions from role."""
        result = await self._revoke_all.execute(parse_id(role_id, "role"))
        resp.media = {
            "message": "All permissions removed from role successfully",
            "removed_count": result.removed_count,
        }
        resp.status = falcon.HTTP_200
