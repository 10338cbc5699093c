"""Role repository port."""

from typing import Protocol

from edugate.domain.entities import Role, RoleWithPermissions


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: int) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def list_with_permissions(self) -> list[RoleWithPermissions]: ...

    async def create(
        self,
        name: str,
        description: str | None = None,
        creator_id: int | None = None,
        role_id: int | None = None,
    ) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: int) -> None: ...

    async def add_permissions(self, role_id: int, permission_ids: list[int]) -> None: ...

    async def remove_permissions(self, role_id: int, permission_ids: list[int]) -> int: ...
