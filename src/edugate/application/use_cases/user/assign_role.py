"""Assign role use case."""

import logging

from edugate.domain.entities import User
from edugate.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """Move a user to another role.

    Callers are resolved against the user record on every request, so the
    new role applies to the user's next request without a fresh token.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: int, role_id: int) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            if not await uow.roles.get_by_id(role_id):
                raise NotFound("Role", role_id)
            await uow.users.update_role(user_id, role_id)

        logger.info("User %s moved from role %s to %s", user_id, user.role_id, role_id)
        user.role_id = role_id
        return user
