"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from edugate.application.ports.repositories import (
    LectureRepository,
    PermissionRepository,
    ProjectionRepository,
    RoleRepository,
    TopicRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def lectures(self) -> LectureRepository: ...

    @property
    def topics(self) -> TopicRepository: ...

    @property
    def projections(self) -> ProjectionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
