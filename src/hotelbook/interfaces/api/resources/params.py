"""Request parameter parsing shared by resources."""

from hotelbook.domain.exceptions import ValidationError


def parse_id(value: str | int, label: str) -> int:
    """Parse an integer id; raise ValidationError('Invalid <label> ID') otherwise."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label} ID")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} ID") from None
    if parsed < 1:
        raise ValidationError(f"Invalid {label} ID")
    return parsed


def parse_id_list(value: object, field_name: str) -> list[int]:
    """Parse a non-empty JSON array of integer ids."""
    if not isinstance(value, list) or not value:
        raise ValidationError(f"{field_name} must be a non-empty array of IDs")
    ids = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValidationError(f"{field_name} must contain only integer IDs")
        ids.append(item)
    return ids


async def get_json_object(req) -> dict:
    """Read request body; it must be a JSON object."""
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
