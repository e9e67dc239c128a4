"""Domain value objects."""

from hotelbook.domain.value_objects.error_kind import ErrorKind

__all__ = [
    "ErrorKind",
]
