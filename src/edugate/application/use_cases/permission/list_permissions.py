"""Permission catalog read use cases."""

from edugate.domain.entities import Permission
from edugate.domain.exceptions import NotFound


class ListPermissionsUseCase:
    """List the catalog, or the permissions a role currently holds.

    Reads persistence rather than the permission cache.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int | None = None) -> list[Permission]:
        async with self._uow_factory() as uow:
            if role_id is None:
                return await uow.permissions.list_all()
            if not await uow.roles.get_by_id(role_id):
                raise NotFound("Role", role_id)
            return await uow.permissions.list_for_role(role_id)


class GetPermissionUseCase:
    """Get one permission by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: int) -> Permission:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
        if not permission:
            raise NotFound("Permission", permission_id)
        return permission
