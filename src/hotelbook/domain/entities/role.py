"""Role entity for RBAC."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role - ADMIN, SUPERVISOR, STAFF, CUSTOMER; seeded, read-only here."""

    id: int
    name: str
