"""Role entity for RBAC."""

from dataclasses import dataclass, field

from edugate.domain.entities.permission import Permission


@dataclass
class Role:
    """Role - named set of granted permissions."""

    id: int
    name: str
    description: str | None = None
    creator_id: int | None = None


@dataclass
class RoleWithPermissions:
    """Role together with every permission currently granted to it."""

    role: Role
    permissions: list[Permission] = field(default_factory=list)
