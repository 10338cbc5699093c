"""Permission repository port."""

from typing import Protocol

from edugate.domain.entities import Permission
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)


class PermissionRepository(Protocol):
    """Port for permission catalog persistence."""

    async def get_by_id(self, permission_id: int) -> Permission | None: ...

    async def get_by_triple(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
    ) -> Permission | None: ...

    async def list_all(self) -> list[Permission]: ...

    async def list_for_role(self, role_id: int) -> list[Permission]: ...

    async def upsert(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
        description: str | None,
    ) -> Permission: ...
