"""Role DTOs."""

from dataclasses import dataclass

from edugate.application.dto.fields import optional_string
from edugate.domain.exceptions import ValidationError


@dataclass
class RoleCreateInput:
    """Input for creating a role."""

    name: str
    description: str | None = None

    @classmethod
    def from_body(cls, body: dict) -> "RoleCreateInput":
        return cls(
            name=optional_string(body, "name") or "",
            description=optional_string(body, "description"),
        )


@dataclass
class RoleUpdateInput:
    """Partial update; None leaves the field unchanged."""

    name: str | None = None
    description: str | None = None

    @classmethod
    def from_body(cls, body: dict) -> "RoleUpdateInput":
        return cls(
            name=optional_string(body, "name"),
            description=optional_string(body, "description"),
        )


def parse_permission_ids(body: dict | None) -> list[int]:
    """Read the `permissions` array of ids from a request body."""
    raw = (body or {}).get("permissions") or []
    if not isinstance(raw, list):
        raise ValidationError("Permissions to add or remove must be an array.")
    ids: list[int] = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("Permission IDs must be integers.")
        ids.append(value)
    return ids


def parse_role_id(body: dict) -> int:
    """Read the `roleId` a user is being moved to."""
    value = body.get("roleId")
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Invalid role ID. Must be an integer.")
    return value
