"""Seed the static permission catalog."""

import logging

from edugate.domain.permission_catalog import build_permission_catalog

logger = logging.getLogger(__name__)


class SeedPermissionsUseCase:
    """Upsert every catalog triple; existing permissions are left as they are."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> int:
        catalog = build_permission_catalog()
        logger.info("Seeding %d permissions", len(catalog))
        async with self._uow_factory() as uow:
            for entry in catalog:
                await uow.permissions.upsert(
                    entry.action, entry.scope, entry.resource, entry.description
                )
        return len(catalog)
