"""JSON shapes for API responses."""

from hotelbook.domain.entities import Permission, Role


def role_to_dict(role: Role) -> dict:
    return {"id": role.id, "name": role.name}


def permission_to_dict(permission: Permission) -> dict:
    return {
        "id": permission.id,
        "name": permission.name,
        "description": permission.description,
    }
