"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

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
from hotelbook.application.use_cases.role.get_role import GetRoleUseCase
from hotelbook.application.use_cases.role.list_roles import ListRolesUseCase
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
from hotelbook.interfaces.api.errors import register_error_handlers
from hotelbook.interfaces.api.resources.health import HealthResource
from hotelbook.interfaces.api.resources.permissions import (
    PermissionResource,
    PermissionsResource,
)
from hotelbook.interfaces.api.resources.role_permissions import (
    RolePermissionAssignmentResource,
    RolePermissionsBulkResource,
    RolePermissionsByRoleResource,
    RolePermissionsResource,
)
from hotelbook.interfaces.api.resources.roles import RoleResource, RolesResource


def create_app(unit_of_work_factory: type, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with use cases bound to unit_of_work_factory."""
    assign_permission = AssignPermissionUseCase(unit_of_work_factory)

    role_permissions_resource = RolePermissionsResource(
        GetRolePermissionMatrixUseCase(unit_of_work_factory),
        assign_permission,
    )
    role_permissions_by_role_resource = RolePermissionsByRoleResource(
        GetRolePermissionsUseCase(unit_of_work_factory),
    )
    assignment_resource = RolePermissionAssignmentResource(
        CheckRolePermissionUseCase(unit_of_work_factory),
        assign_permission,
        RevokePermissionUseCase(unit_of_work_factory),
    )
    bulk_resource = RolePermissionsBulkResource(
        AssignPermissionsBulkUseCase(unit_of_work_factory),
        RevokeAllPermissionsUseCase(unit_of_work_factory),
    )
    permissions_resource = PermissionsResource(
        ListPermissionsUseCase(unit_of_work_factory),
        CreatePermissionUseCase(unit_of_work_factory),
    )
    permission_resource = PermissionResource(
        GetPermissionUseCase(unit_of_work_factory),
        UpdatePermissionUseCase(unit_of_work_factory),
        DeletePermissionUseCase(unit_of_work_factory),
    )
    roles_resource = RolesResource(ListRolesUseCase(unit_of_work_factory))
    role_resource = RoleResource(GetRoleUseCase(unit_of_work_factory))
    health_resource = HealthResource(unit_of_work_factory)

    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/role-permissions", role_permissions_resource)
    app.add_route("/v1/role-permissions/matrix", role_permissions_resource, suffix="matrix")
    app.add_route("/v1/role-permissions/role/{role_id}", role_permissions_by_role_resource)
    app.add_route(
        "/v1/role-permissions/role/{role_id}/permission/{permission_id}",
        assignment_resource,
    )
    app.add_route("/v1/role-permissions/role/{role_id}/permissions", bulk_resource)
    app.add_route("/v1/permissions", permissions_resource)
    app.add_route("/v1/permissions/{permission_id}", permission_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    return app
