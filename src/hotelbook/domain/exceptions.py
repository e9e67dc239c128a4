"""Domain exceptions."""

from hotelbook.domain.value_objects import ErrorKind


class HotelBookError(Exception):
    """Base exception for hotelbook."""

    kind: ErrorKind = ErrorKind.VALIDATION


class PermissionDenied(HotelBookError):
    """User does not have permission for the requested action."""

    kind = ErrorKind.PERMISSION_DENIED


class NotFound(HotelBookError):
    """Requested resource was not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, identifier: object, message: str | None = None) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(message or f"{entity} not found: {identifier}")


class Conflict(HotelBookError):
    """Operation conflicts with existing state (duplicate or in-use record)."""

    kind = ErrorKind.CONFLICT


class ValidationError(HotelBookError):
    """Validation failed for input data."""

    kind = ErrorKind.VALIDATION
