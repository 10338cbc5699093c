"""Seed the platform's default roles and their permissions."""

import logging

from edugate.domain.exceptions import NotFound
from edugate.domain.permission_catalog import (
    DEFAULT_ROLES,
    effective_default_permissions,
)

logger = logging.getLogger(__name__)


class SeedDefaultRolesUseCase:
    """Create missing default roles and grant their missing permissions.

    Requires the permission catalog to be seeded first. Safe to re-run.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> int:
        granted = 0
        async with self._uow_factory() as uow:
            for default in DEFAULT_ROLES:
                role = await uow.roles.get_by_name(default.name)
                if not role:
                    role = await uow.roles.create(
                        default.name,
                        description=default.description,
                        role_id=default.id,
                    )
                    logger.info("Seeded role %s (%s)", role.id, role.name)

                held = {p.id for p in await uow.permissions.list_for_role(role.id)}
                missing: list[int] = []
                for action, scope, resource in effective_default_permissions(default.id):
                    permission = await uow.permissions.get_by_triple(action, scope, resource)
                    if not permission:
                        raise NotFound("Permission", f"{action}/{scope}/{resource}")
                    if permission.id not in held:
                        missing.append(permission.id)

                if missing:
                    await uow.roles.add_permissions(role.id, missing)
                    granted += len(missing)
                    logger.info("Seeded %d permissions for role %s", len(missing), role.name)
        return granted
