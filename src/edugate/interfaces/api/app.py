"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi
from falcon.asgi import App

from edugate.interfaces.api.errors import register_error_handlers
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


@dataclass
class Resources:
    """Every routed responder, built by the composition root."""

    health: HealthResource
    roles: RolesResource
    role: RoleResource
    role_permissions: RolePermissionsResource
    permissions: PermissionsResource
    permission: SinglePermissionResource
    lecture: LectureResource
    topics: TopicsResource
    topic: TopicResource
    user_role: UserRoleResource
    logout: LogoutResource


def create_app(resources: Resources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/roles", resources.roles)
    app.add_route("/v1/roles/{id}", resources.role)
    app.add_route("/v1/roles/{id}/permissions", resources.role_permissions)
    app.add_route("/v1/permissions", resources.permissions)
    app.add_route("/v1/permissions/{id}", resources.permission)
    app.add_route("/v1/lectures/{id}", resources.lecture)
    app.add_route("/v1/topics", resources.topics)
    app.add_route("/v1/topics/{name}", resources.topic)
    app.add_route("/v1/users/{id}/role", resources.user_role)
    app.add_route("/v1/auth/logout", resources.logout)
    return app
