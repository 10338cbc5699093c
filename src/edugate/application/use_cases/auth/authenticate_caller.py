"""Resolve a verified session token to a caller."""

from edugate.application.ports import TokenClaims
from edugate.domain.entities import Caller
from edugate.domain.exceptions import Unauthenticated


class AuthenticateCallerUseCase:
    """Load the user and role behind verified token claims."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, claims: TokenClaims) -> Caller:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(claims.user_id)
            if not user:
                raise Unauthenticated("Couldn't find logged in user.")
            role = await uow.roles.get_by_id(user.role_id)
            if not role:
                raise Unauthenticated("Logged in user has no valid role.")
        return Caller(id=user.id, role_id=role.id, role_name=role.name)
