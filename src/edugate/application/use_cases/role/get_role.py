"""Role read use cases."""

from edugate.domain.entities import Role
from edugate.domain.exceptions import NotFound


class GetRoleUseCase:
    """Get one role by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: int) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
        if not role:
            raise NotFound("Role", role_id)
        return role


class ListRolesUseCase:
    """List every role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_all()
