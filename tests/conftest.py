"""Pytest fixtures for EduGate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from edugate.domain.entities import (
    Caller,
    Lecture,
    Permission,
    ResourceProjection,
    Role,
    RoleWithPermissions,
    Topic,
    User,
)
from edugate.domain.exceptions import ConfigurationError, Conflict, NotFound
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission catalog; reads grants from the shared join table."""

    def __init__(self, grants: dict[int, set[int]]) -> None:
        self._by_id: dict[int, Permission] = {}
        self._grants = grants
        self._next_id = 1

    async def get_by_id(self, permission_id: int) -> Permission | None:
        return self._by_id.get(permission_id)

    async def get_by_triple(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
    ) -> Permission | None:
        for p in self._by_id.values():
            if p.triple == (action, scope, resource):
                return p
        return None

    async def list_all(self) -> list[Permission]:
        return sorted(self._by_id.values(), key=lambda p: p.id)

    async def list_for_role(self, role_id: int) -> list[Permission]:
        ids = self._grants.get(role_id, set())
        return [self._by_id[i] for i in sorted(ids)]

    async def upsert(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
        description: str | None = None,
    ) -> Permission:
        existing = await self.get_by_triple(action, scope, resource)
        if existing:
            return existing
        return self.add(action, scope, resource, description)

    def add(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
        description: str | None = None,
    ) -> Permission:
        """Helper to add a permission for tests."""
        permission = Permission(
            id=self._next_id,
            action=action,
            scope=scope,
            resource=resource,
            description=description,
        )
        self._by_id[permission.id] = permission
        self._next_id += 1
        return permission


class FakeRoleRepository:
    """In-memory role repository with the role_permission join table."""

    def __init__(self, permissions: FakePermissionRepository, grants: dict[int, set[int]]) -> None:
        self._by_id: dict[int, Role] = {}
        self._permissions = permissions
        self._grants = grants
        self._next_id = 100
        self.add_calls: list[tuple[int, list[int]]] = []
        self.remove_calls: list[tuple[int, list[int]]] = []

    async def get_by_id(self, role_id: int) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name == name:
                return role
        return None

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.id)

    async def list_with_permissions(self) -> list[RoleWithPermissions]:
        return [
            RoleWithPermissions(
                role=role,
                permissions=await self._permissions.list_for_role(role.id),
            )
            for role in await self.list_all()
        ]

    async def create(
        self,
        name: str,
        description: str | None = None,
        creator_id: int | None = None,
        role_id: int | None = None,
    ) -> Role:
        if await self.get_by_name(name):
            raise Conflict(f"Role '{name}' already exists")
        if role_id is None:
            role_id = self._next_id
            self._next_id += 1
        role = Role(id=role_id, name=name, description=description, creator_id=creator_id)
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = replace(role)

    async def delete(self, role_id: int) -> None:
        self._by_id.pop(role_id, None)
        self._grants.pop(role_id, None)

    async def add_permissions(self, role_id: int, permission_ids: list[int]) -> None:
        self.add_calls.append((role_id, list(permission_ids)))
        held = self._grants.setdefault(role_id, set())
        for permission_id in permission_ids:
            if permission_id in held:
                raise Conflict(f"Permission {permission_id} already granted to role {role_id}")
            if permission_id not in self._permissions._by_id:
                raise NotFound("Permission", permission_id)
        held.update(permission_ids)

    async def remove_permissions(self, role_id: int, permission_ids: list[int]) -> int:
        self.remove_calls.append((role_id, list(permission_ids)))
        held = self._grants.get(role_id, set())
        removed = held & set(permission_ids)
        held -= removed
        return len(removed)

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, User] = {}

    async def get_by_id(self, user_id: int) -> User | None:
        user = self._by_id.get(user_id)
        return replace(user) if user else None

    async def update_role(self, user_id: int, role_id: int) -> None:
        self._by_id[user_id] = replace(self._by_id[user_id], role_id=role_id)

    def add_user(self, user: User) -> None:
        self._by_id[user.id] = user


class FakeLectureRepository:
    """In-memory lecture repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, Lecture] = {}

    async def get_by_id(self, lecture_id: int) -> Lecture | None:
        lecture = self._by_id.get(lecture_id)
        return replace(lecture) if lecture else None

    async def update(self, lecture: Lecture) -> None:
        self._by_id[lecture.id] = replace(lecture)

    async def delete(self, lecture_id: int) -> None:
        self._by_id.pop(lecture_id, None)

    def add_lecture(self, lecture: Lecture) -> None:
        self._by_id[lecture.id] = lecture


class FakeTopicRepository:
    """In-memory topic repository keyed by name."""

    def __init__(self) -> None:
        self._by_name: dict[str, Topic] = {}

    async def get_by_name(self, name: str) -> Topic | None:
        topic = self._by_name.get(name)
        return replace(topic) if topic else None

    async def list(self, *, public_only: bool) -> list[Topic]:
        topics = sorted(self._by_name.values(), key=lambda t: t.name)
        if public_only:
            topics = [t for t in topics if t.public]
        return topics

    async def update(self, topic: Topic) -> None:
        self._by_name[topic.name] = replace(topic)

    async def delete(self, topic_id: int) -> None:
        self._by_name = {n: t for n, t in self._by_name.items() if t.id != topic_id}

    def add_topic(self, topic: Topic) -> None:
        self._by_name[topic.name] = topic


class FakeProjectionRepository:
    """Narrow projections over the other fake repositories."""

    def __init__(
        self,
        roles: FakeRoleRepository,
        lectures: FakeLectureRepository,
        topics: FakeTopicRepository,
    ) -> None:
        self._roles = roles
        self._lectures = lectures
        self._topics = topics

    def _rows(self, resource: PermissionResource) -> list:
        if resource is PermissionResource.ROLE:
            return list(self._roles._by_id.values())
        if resource is PermissionResource.LECTURE:
            return list(self._lectures._by_id.values())
        if resource is PermissionResource.TOPIC:
            return list(self._topics._by_name.values())
        return []

    def _find(self, resource: PermissionResource, attr: str, key):
        for row in self._rows(resource):
            if getattr(row, attr, None) == key:
                return row
        return None

    async def creator_id_by_id(self, resource: PermissionResource, resource_id: int) -> int | None:
        row = self._find(resource, "id", resource_id)
        if row is None:
            raise NotFound(resource.value.capitalize(), resource_id)
        return row.creator_id

    async def creator_id_by_name(self, resource: PermissionResource, name: str) -> int | None:
        if resource is PermissionResource.LECTURE:
            raise ConfigurationError("LECTURE cannot be looked up by name")
        row = self._find(resource, "name", name)
        if row is None:
            raise NotFound(resource.value.capitalize(), name)
        return row.creator_id

    async def projection_by_id(
        self, resource: PermissionResource, resource_id: int
    ) -> ResourceProjection | None:
        row = self._find(resource, "id", resource_id)
        return self._project(row)

    async def projection_by_name(
        self, resource: PermissionResource, name: str
    ) -> ResourceProjection | None:
        row = self._find(resource, "name", name)
        return self._project(row)

    @staticmethod
    def _project(row) -> ResourceProjection | None:
        if row is None:
            return None
        return ResourceProjection(
            id=row.id,
            name=getattr(row, "name", None),
            public=getattr(row, "public", None),
        )


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.grants: dict[int, set[int]] = {}
        self.permissions = FakePermissionRepository(self.grants)
        self.roles = FakeRoleRepository(self.permissions, self.grants)
        self.users = FakeUserRepository()
        self.lectures = FakeLectureRepository()
        self.topics = FakeTopicRepository()
        self.projections = FakeProjectionRepository(self.roles, self.lectures, self.topics)
        self.entered = 0

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def grant(self, role_id: int, *triples) -> None:
        """Helper: grant catalog triples, adding them to the catalog if needed."""
        held = self.grants.setdefault(role_id, set())
        for action, scope, resource in triples:
            permission = None
            for p in self.permissions._by_id.values():
                if p.triple == (action, scope, resource):
                    permission = p
            if permission is None:
                permission = self.permissions.add(action, scope, resource)
            held.add(permission.id)


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.entered += 1
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over `fake_uow`."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def mock_permission_cache():
    """AsyncMock standing in for the permission cache refresher."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.refresh.return_value = None
    return mock


def make_caller(user_id: int = 3, role_id: int = 2, role_name: str = "Admin") -> Caller:
    return Caller(id=user_id, role_id=role_id, role_name=role_name)
