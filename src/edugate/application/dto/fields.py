"""Typed field access for JSON request bodies."""

from edugate.domain.exceptions import ValidationError


def optional_string(body: dict, field: str) -> str | None:
    """Value of a string field, None when absent; rejects any other JSON type."""
    value = body.get(field)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"Field '{field}' must be a string.")
    return value
