"""Update role use case."""

import logging

from edugate.application.dto.role_dto import RoleUpdateInput
from edugate.application.ports import PermissionCacheRefresher
from edugate.domain.entities import Role
from edugate.domain.exceptions import Conflict, NotFound, ValidationError

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Rename or re-describe a role.

    The permission cache is keyed by role name, so a rename refreshes it.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_cache: PermissionCacheRefresher,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_cache = permission_cache

    async def execute(self, role_id: int, input_data: RoleUpdateInput) -> Role:
        renamed = False
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            if input_data.name is not None:
                name = input_data.name.strip()
                if not name:
                    raise ValidationError("Name is required.")
                if name != role.name:
                    existing = await uow.roles.get_by_name(name)
                    if existing and existing.id != role.id:
                        raise Conflict(f"Role '{name}' already exists")
                    role.name = name
                    renamed = True
            if input_data.description is not None:
                role.description = input_data.description

            await uow.roles.update(role)

        if renamed:
            logger.info("Role %s renamed to %s", role.id, role.name)
            await self._permission_cache.refresh()
        return role
