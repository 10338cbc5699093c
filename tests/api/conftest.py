"""Fixtures for API tests."""

import asyncio

import pytest
from falcon.testing import TestClient

from edugate.application.use_cases.auth.authenticate_caller import (
    AuthenticateCallerUseCase,
)
from edugate.application.use_cases.lecture.manage_lecture import (
    DeleteLectureUseCase,
    GetLectureUseCase,
    UpdateLectureUseCase,
)
from edugate.application.use_cases.permission.list_permissions import (
    GetPermissionUseCase,
    ListPermissionsUseCase,
)
from edugate.application.use_cases.permission.seed_permissions import (
    SeedPermissionsUseCase,
)
from edugate.application.use_cases.role.add_permissions import AddPermissionsUseCase
from edugate.application.use_cases.role.create_role import CreateRoleUseCase
from edugate.application.use_cases.role.delete_role import DeleteRoleUseCase
from edugate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from edugate.application.use_cases.role.remove_permissions import (
    RemovePermissionsUseCase,
)
from edugate.application.use_cases.role.seed_default_roles import (
    SeedDefaultRolesUseCase,
)
from edugate.application.use_cases.role.update_role import UpdateRoleUseCase
from edugate.application.use_cases.topic.manage_topic import (
    DeleteTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    UpdateTopicUseCase,
)
from edugate.application.use_cases.user.assign_role import AssignRoleUseCase
from edugate.domain.entities import Lecture, Topic, User
from edugate.domain.value_objects import PermissionResource
from edugate.infrastructure.auth.jwt_provider import JWTProvider
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.infrastructure.permission.permission_cache import PermissionCache
from edugate.infrastructure.permission.resource_lookup import build_lookup_registry
from edugate.infrastructure.permission.scope_resolver import ScopeResolver
from edugate.interfaces.api.app import Resources, create_app
from edugate.interfaces.api.middleware.auth import AuthMiddleware
from edugate.interfaces.api.resources.auth import LogoutResource
from edugate.interfaces.api.resources.health import HealthResource
from edugate.interfaces.api.resources.lectures import LectureResource
from edugate.interfaces.api.resources.permissions import (
    PermissionsResource,
    SinglePermissionResource,
)
from edugate.interfaces.api.resources.roles import (
    RolePermissionsResource,
    RoleResource,
    RolesResource,
)
from edugate.interfaces.api.resources.topics import TopicResource, TopicsResource
from edugate.interfaces.api.resources.users import UserRoleResource

from tests.conftest import FakeUnitOfWork, shared_uow_factory

SECRET = "api-test-secret-that-is-long-enough-for-hs256"

# user id -> role id
FOUNDER, SUPER_ADMIN, ADMIN, USER, OTHER_ADMIN = 1, 2, 3, 4, 9
USERS = {FOUNDER: 0, SUPER_ADMIN: 1, ADMIN: 2, USER: 3, OTHER_ADMIN: 2}

ALL_TYPES = [PermissionResource.ROLE, PermissionResource.LECTURE, PermissionResource.TOPIC]


def seed_platform(uow: FakeUnitOfWork) -> None:
    """Catalog, default roles, users, lectures and topics."""
    factory = shared_uow_factory(uow)

    async def _seed() -> None:
        await SeedPermissionsUseCase(factory).execute()
        await SeedDefaultRolesUseCase(factory).execute()

    asyncio.run(_seed())
    for user_id, role_id in USERS.items():
        uow.users.add_user(User(id=user_id, role_id=role_id, email=f"user{user_id}@example.com"))

    uow.lectures.add_lecture(Lecture(id=12, subject_id=1, title="Mine", creator_id=ADMIN))
    uow.lectures.add_lecture(Lecture(id=13, subject_id=1, title="Theirs", creator_id=OTHER_ADMIN))
    uow.lectures.add_lecture(Lecture(id=14, subject_id=1, title="Legacy", creator_id=None))
    uow.lectures.add_lecture(Lecture(id=15, subject_id=1, title="Student notes", creator_id=USER))
    uow.topics.add_topic(Topic(id=1, name="news", public=True, creator_id=ADMIN))
    uow.topics.add_topic(Topic(id=2, name="staff", public=False, creator_id=OTHER_ADMIN))


def build_app(uow: FakeUnitOfWork, lookup_types=ALL_TYPES):
    """Falcon app wired like the composition root, over in-memory fakes."""
    factory = shared_uow_factory(uow)
    cache = PermissionCache(factory)
    asyncio.run(cache.refresh())

    authorizer = Authorizer(
        ScopeResolver(cache, super_role_id=0),
        build_lookup_registry(factory, lookup_types),
    )
    tokens = JWTProvider("HS256", SECRET, SECRET)
    resources = Resources(
        health=HealthResource(cache),
        roles=RolesResource(authorizer, ListRolesUseCase(factory), CreateRoleUseCase(factory)),
        role=RoleResource(
            authorizer,
            GetRoleUseCase(factory),
            UpdateRoleUseCase(factory, cache),
            DeleteRoleUseCase(factory, cache),
        ),
        role_permissions=RolePermissionsResource(
            authorizer,
            ListPermissionsUseCase(factory),
            AddPermissionsUseCase(factory, cache),
            RemovePermissionsUseCase(factory, cache),
        ),
        permissions=PermissionsResource(authorizer, ListPermissionsUseCase(factory)),
        permission=SinglePermissionResource(authorizer, GetPermissionUseCase(factory)),
        lecture=LectureResource(
            authorizer,
            GetLectureUseCase(factory),
            UpdateLectureUseCase(factory),
            DeleteLectureUseCase(factory),
        ),
        topics=TopicsResource(authorizer, ListTopicsUseCase(factory)),
        topic=TopicResource(
            authorizer,
            GetTopicUseCase(factory),
            UpdateTopicUseCase(factory),
            DeleteTopicUseCase(factory),
        ),
        user_role=UserRoleResource(authorizer, AssignRoleUseCase(factory)),
        logout=LogoutResource(),
    )
    return create_app(
        resources,
        middleware=[AuthMiddleware(tokens, AuthenticateCallerUseCase(factory))],
    )


def permission_id(uow: FakeUnitOfWork, action, scope, resource) -> int:
    for p in uow.permissions._by_id.values():
        if p.triple == (action, scope, resource):
            return p.id
    raise LookupError((action, scope, resource))


@pytest.fixture
def platform() -> FakeUnitOfWork:
    uow = FakeUnitOfWork()
    seed_platform(uow)
    return uow


@pytest.fixture
def client(platform) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(build_app(platform))


@pytest.fixture
def auth():
    """Bearer headers for a user id."""
    tokens = JWTProvider("HS256", SECRET, SECRET)

    def _headers(user_id: int) -> dict[str, str]:
        token = tokens.create_token(user_id, USERS[user_id])
        return {"Authorization": f"Bearer {token}"}

    return _headers
