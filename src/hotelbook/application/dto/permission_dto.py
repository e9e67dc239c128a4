"""Permission DTOs."""

import math
from dataclasses import dataclass

from hotelbook.domain.entities import Permission, Role


@dataclass
class PermissionCreateInput:
    """Input for creating a permission."""

    name: str
    description: str | None = None


UNSET = object()


@dataclass
class PermissionUpdateInput:
    """Partial update.

    name=None leaves the name unchanged. description=UNSET leaves the
    description unchanged; description=None clears it.
    """

    name: str | None = None
    description: str | None | object = UNSET


@dataclass
class PermissionListItem:
    """Permission with the number of roles it is granted to."""

    permission: Permission
    role_count: int


@dataclass
class PermissionPage:
    """Page of permissions ordered by name."""

    items: list[PermissionListItem]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


@dataclass
class PermissionDetail:
    """Permission with the roles it is granted to."""

    permission: Permission
    roles: list[Role]
