"""Revoke permissions from a role."""

import asyncio
import logging

from edugate.application.ports import PermissionCacheRefresher
from edugate.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RemovePermissionsUseCase:
    """Delete role/permission rows, then rebuild the permission cache.

    Ids that are not currently granted are ignored.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_cache: PermissionCacheRefresher,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_cache = permission_cache
        self._write_lock = asyncio.Lock()

    async def execute(self, role_id: int, permission_ids: list[int]) -> None:
        if not permission_ids:
            return

        async with self._write_lock:
            async with self._uow_factory() as uow:
                if not await uow.roles.get_by_id(role_id):
                    raise NotFound("Role", role_id)
                removed = await uow.roles.remove_permissions(role_id, list(permission_ids))

        logger.info("Revoked %d of %s from role %s", removed, permission_ids, role_id)
        await self._permission_cache.refresh()
