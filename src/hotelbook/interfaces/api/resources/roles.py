"""Roles API resources (read-only)."""

import falcon
import falcon.asgi

from hotelbook.application.use_cases.role.get_role import GetRoleUseCase
from hotelbook.application.use_cases.role.list_roles import ListRolesUseCase
from hotelbook.interfaces.api.middleware.auth import require_user
from hotelbook.interfaces.api.resources.params import parse_id
from hotelbook.interfaces.api.resources.serializers import (
    permission_to_dict,
    role_to_dict,
)


@falcon.before(require_user)
class RolesResource:
    """GET /v1/roles - list roles."""

    def __init__(self, list_roles: ListRolesUseCase) -> None:
        self._list = list_roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute()
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200


@falcon.before(require_user)
class RoleResource:
    """GET /v1/roles/{role_id} - role with its permissions."""

    def __init__(self, get_role: GetRoleUseCase) -> None:
        self._get = get_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        detail = await self._get.execute(parse_id(role_id, "role"))
        resp.media = {
            **role_to_dict(detail.role),
            "permissions": [permission_to_dict(p) for p in detail.permissions],
        }
        resp.status = falcon.HTTP_200
