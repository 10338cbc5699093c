"""User repository port."""

from typing import Protocol

from edugate.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: int) -> User | None: ...

    async def update_role(self, user_id: int, role_id: int) -> None: ...
