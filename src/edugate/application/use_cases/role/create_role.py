"""Create role use case."""

import logging

from edugate.application.dto.role_dto import RoleCreateInput
from edugate.domain.entities import Role
from edugate.domain.exceptions import Conflict, ValidationError

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a named role owned by the caller."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, creator_id: int, input_data: RoleCreateInput) -> Role:
        name = (input_data.name or "").strip()
        if not name:
            raise ValidationError("Name is required.")
        if len(name) > 255:
            raise ValidationError("Name cannot be greater than 255 characters.")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise Conflict(f"Role '{name}' already exists")
            role = await uow.roles.create(
                name, description=input_data.description, creator_id=creator_id
            )

        logger.info("Role %s (%s) created by user %s", role.id, role.name, creator_id)
        return role
