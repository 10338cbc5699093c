"""Lifespan middleware - pool and permission cache on startup, pool close on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from edugate.application.ports import PermissionCacheRefresher

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the pool, then fills the permission cache before serving."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        permission_cache: PermissionCacheRefresher,
    ) -> None:
        self._pool = pool
        self._permission_cache = permission_cache

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open()
        await self._permission_cache.refresh()
        logger.info("Startup complete")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
