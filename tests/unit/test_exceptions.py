"""Unit tests for domain exceptions."""

import pytest

from hotelbook.domain.exceptions import (
    Conflict,
    HotelBookError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from hotelbook.domain.value_objects import ErrorKind


@pytest.mark.parametrize(
    ("exc_type", "kind"),
    [
        (Conflict, ErrorKind.CONFLICT),
        (ValidationError, ErrorKind.VALIDATION),
        (PermissionDenied, ErrorKind.PERMISSION_DENIED),
    ],
)
def test_exception_kind(exc_type, kind) -> None:
    """Each domain exception carries its error kind."""
    assert issubclass(exc_type, HotelBookError)
    assert exc_type("boom").kind is kind


def test_not_found_carries_entity() -> None:
    """NotFound records which entity was missing."""
    err = NotFound("Permission", 7)

    assert err.kind is ErrorKind.NOT_FOUND
    assert err.entity == "Permission"
    assert err.identifier == 7
    assert str(err) == "Permission not found: 7"


def test_not_found_custom_message() -> None:
    err = NotFound("RolePermission", "1/2", "Permission not assigned to role")

    assert str(err) == "Permission not assigned to role"


def test_raise_not_found_catchable_as_base() -> None:
    with pytest.raises(HotelBookError):
        raise NotFound("Role", 1)
