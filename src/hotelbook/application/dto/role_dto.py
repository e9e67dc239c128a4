"""Role DTOs."""

from dataclasses import dataclass

from hotelbook.domain.entities import Permission, Role


@dataclass
class RoleDetail:
    """Role with its granted permissions."""

    role: Role
    permissions: list[Permission]
