"""Application entry point and composition root."""

import argparse
import logging

from edugate import __version__
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
from edugate.application.use_cases.role.add_permissions import AddPermissionsUseCase
from edugate.application.use_cases.role.create_role import CreateRoleUseCase
from edugate.application.use_cases.role.delete_role import DeleteRoleUseCase
from edugate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from edugate.application.use_cases.role.remove_permissions import (
    RemovePermissionsUseCase,
)
from edugate.application.use_cases.role.update_role import UpdateRoleUseCase
from edugate.application.use_cases.topic.manage_topic import (
    DeleteTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    UpdateTopicUseCase,
)
from edugate.application.use_cases.user.assign_role import AssignRoleUseCase
from edugate.config import Settings, get_settings
from edugate.infrastructure.auth.jwt_provider import JWTProvider
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.infrastructure.permission.permission_cache import PermissionCache
from edugate.infrastructure.permission.resource_lookup import build_lookup_registry
from edugate.infrastructure.permission.scope_resolver import ScopeResolver
from edugate.infrastructure.persistence.postgres.connection import create_pool
from edugate.infrastructure.persistence.postgres.projection_repository import (
    RESOURCE_TABLES,
)
from edugate.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from edugate.interfaces.api.app import Resources, create_app
from edugate.interfaces.api.middleware.auth import AuthMiddleware
from edugate.interfaces.api.middleware.cors import CORSMiddleware
from edugate.interfaces.api.middleware.lifespan import LifespanMiddleware
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

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_edugate_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    permission_cache = PermissionCache(uow_factory)
    authorizer = Authorizer(
        ScopeResolver(permission_cache, super_role_id=settings.super_role_id),
        build_lookup_registry(uow_factory, RESOURCE_TABLES),
    )
    token_provider = JWTProvider.from_settings(settings)

    resources = Resources(
        health=HealthResource(permission_cache),
        roles=RolesResource(
            authorizer,
            ListRolesUseCase(uow_factory),
            CreateRoleUseCase(uow_factory),
        ),
        role=RoleResource(
            authorizer,
            GetRoleUseCase(uow_factory),
            UpdateRoleUseCase(uow_factory, permission_cache),
            DeleteRoleUseCase(uow_factory, permission_cache),
        ),
        role_permissions=RolePermissionsResource(
            authorizer,
            ListPermissionsUseCase(uow_factory),
            AddPermissionsUseCase(uow_factory, permission_cache),
            RemovePermissionsUseCase(uow_factory, permission_cache),
        ),
        permissions=PermissionsResource(authorizer, ListPermissionsUseCase(uow_factory)),
        permission=SinglePermissionResource(authorizer, GetPermissionUseCase(uow_factory)),
        lecture=LectureResource(
            authorizer,
            GetLectureUseCase(uow_factory),
            UpdateLectureUseCase(uow_factory),
            DeleteLectureUseCase(uow_factory),
        ),
        topics=TopicsResource(authorizer, ListTopicsUseCase(uow_factory)),
        topic=TopicResource(
            authorizer,
            GetTopicUseCase(uow_factory),
            UpdateTopicUseCase(uow_factory),
            DeleteTopicUseCase(uow_factory),
        ),
        user_role=UserRoleResource(authorizer, AssignRoleUseCase(uow_factory)),
        logout=LogoutResource(),
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        resources,
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool, permission_cache),
            AuthMiddleware(token_provider, AuthenticateCallerUseCase(uow_factory)),
        ],
    )


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_edugate_app()
    logger.info("EduGate v%s listening on %s:%s", __version__, host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="edugate", description="EduGate API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--version", action="version", version=f"EduGate v{__version__}")
    args = parser.parse_args()
    run_server(args.host, args.port)


if __name__ == "__main__":
    main()
