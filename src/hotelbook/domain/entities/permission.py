"""Permission entity."""

from dataclasses import dataclass


@dataclass
class Permission:
    """Permission - named capability that can be granted to roles."""

    id: int
    name: str
    description: str | None = None
