"""Permissions API resources."""

import falcon
import falcon.asgi

from hotelbook.application.dto.permission_dto import (
    UNSET,
    PermissionCreateInput,
    PermissionUpdateInput,
)
from hotelbook.application.use_cases.permission.create_permission import (
    CreatePermissionUseCase,
)
from hotelbook.application.use_cases.permission.delete_permission import (
    DeletePermissionUseCase,
)
from hotelbook.application.use_cases.permission.get_permission import GetPermissionUseCase
from hotelbook.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from hotelbook.application.use_cases.permission.update_permission import (
    UpdatePermissionUseCase,
)
from hotelbook.domain.exceptions import ValidationError
from hotelbook.interfaces.api.middleware.auth import require_admin, require_user
from hotelbook.interfaces.api.resources.params import get_json_object, parse_id
from hotelbook.interfaces.api.resources.serializers import (
    permission_to_dict,
    role_to_dict,
)


def _optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


class PermissionsResource:
    """GET/POST /v1/permissions - list and create permissions."""

    def __init__(
        self,
        list_permissions: ListPermissionsUseCase,
        create_permission: CreatePermissionUseCase,
    ) -> None:
        self._list = list_permissions
        self._create = create_permission

    @falcon.before(require_user)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List permissions with page/limit pagination."""
        page = req.get_param_as_int("page") or 1
        limit = req.get_param_as_int("limit") or 10

        result = await self._list.execute(page=page, limit=limit)
        resp.media = {
            "items": [
                {**permission_to_dict(item.permission), "role_count": item.role_count}
                for item in result.items
            ],
            "pagination": {
                "page": result.page,
                "limit": result.limit,
                "total": result.total,
                "pages": result.pages,
            },
        }
        resp.status = falcon.HTTP_200

    @falcon.before(require_admin)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create permission."""
        body = await get_json_object(req)
        name = _optional_str(body, "name")
        if not name:
            raise ValidationError("Permission name is required")

        permission = await self._create.execute(
            PermissionCreateInput(name=name, description=_optional_str(body, "description"))
        )
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_201


class PermissionResource:
    """GET/PUT/DELETE /v1/permissions/{permission_id}."""

    def __init__(
        self,
        get_permission: GetPermissionUseCase,
        update_permission: UpdatePermissionUseCase,
        delete_permission: DeletePermissionUseCase,
    ) -> None:
        self._get = get_permission
        self._update = update_permission
        self._delete = delete_permission

    @falcon.before(require_user)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        """Get permission with the roles holding it."""
        detail = await self._get.execute(parse_id(permission_id, "permission"))
        resp.media = {
            **permission_to_dict(detail.permission),
            "roles": [role_to_dict(r) for r in detail.roles],
        }
        resp.status = falcon.HTTP_200

    @falcon.before(require_admin)
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        """Update name and/or description; "description": null clears it."""
        pid = parse_id(permission_id, "permission")
        body = await get_json_object(req)
        permission = await self._update.execute(
            pid,
            PermissionUpdateInput(
                name=_optional_str(body, "name"),
                description=(
                    _optional_str(body, "description") if "description" in body else UNSET
                ),
            ),
        )
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_200

    @falcon.before(require_admin)
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        """Delete permission unless a role holds it."""
        await self._delete.execute(parse_id(permission_id, "permission"))
        resp.status = falcon.HTTP_204
