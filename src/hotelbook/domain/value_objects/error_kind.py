"""Error kinds carried by domain exceptions."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a domain failure, inspected by the HTTP boundary."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    PERMISSION_DENIED = "permission_denied"
