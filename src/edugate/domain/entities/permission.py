"""Permission entity - one (action, scope, resource) triple."""

from dataclasses import dataclass

from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)


@dataclass(frozen=True)
class Permission:
    """Permission - immutable once seeded, unique by triple."""

    id: int
    action: PermissionAction
    scope: PermissionScope
    resource: PermissionResource
    description: str | None = None

    @property
    def triple(self) -> tuple[PermissionAction, PermissionScope, PermissionResource]:
        return (self.action, self.scope, self.resource)
