"""Delete role use case."""

import logging

from edugate.application.ports import PermissionCacheRefresher
from edugate.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role and its grants, then drop it from the cache."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_cache: PermissionCacheRefresher,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_cache = permission_cache

    async def execute(self, role_id: int) -> None:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            await uow.roles.delete(role_id)

        logger.info("Role %s (%s) deleted", role_id, role.name)
        await self._permission_cache.refresh()
