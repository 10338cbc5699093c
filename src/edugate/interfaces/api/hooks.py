"""Falcon `before` hooks guarding responders with the authorization engine.

Responders guarded by these hooks must expose the engine as an `authorizer`
attribute. Usage::

    @falcon.before(require_permission(A.UPDATE, S.OWN, R.LECTURE))
    @falcon.before(check_user_is_resource_creator(R.LECTURE))
    async def on_patch(self, req, resp, id): ...

Hooks run top to bottom, so `require_permission` must come first.
"""

import falcon.asgi

from edugate.domain.entities import Caller
from edugate.domain.exceptions import ConfigurationError, Unauthenticated
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    ResourceDesignation,
    ScopeGrant,
)
from edugate.infrastructure.permission.authorizer import Authorizer

NOT_LOGGED_IN = "You're not logged in! Please log in to access this resource."


def current_caller(req: falcon.asgi.Request) -> Caller:
    """Authenticated caller set by AuthMiddleware, or raise Unauthenticated."""
    caller = getattr(req.context, "caller", None)
    if caller is None:
        raise Unauthenticated(getattr(req.context, "auth_error", None) or NOT_LOGGED_IN)
    return caller


def _authorizer(resource: object) -> Authorizer:
    authorizer = getattr(resource, "authorizer", None)
    if authorizer is None:
        raise ConfigurationError(
            f"{type(resource).__name__} is guarded but has no authorizer"
        )
    return authorizer


def _grant(req: falcon.asgi.Request) -> ScopeGrant:
    grant = getattr(req.context, "scope_grant", None)
    if grant is None:
        raise ConfigurationError("require_permission must run before instance checks")
    return grant


def require_permission(
    action: PermissionAction,
    required_scope: PermissionScope,
    resource_type: PermissionResource,
):
    """Resolve the caller's scope and keep it on `req.context.scope_grant`."""

    async def hook(req, resp, resource, params) -> None:
        caller = current_caller(req)
        grant = _authorizer(resource).require_permission(
            caller, action, required_scope, resource_type
        )
        req.context.scope_grant = grant
        req.context.can_access_restricted = grant.can_access_restricted

    return hook


def check_user_is_resource_creator(resource_type: PermissionResource):
    """Reject OWN-scoped callers acting on a resource created by someone else."""

    async def hook(req, resp, resource, params) -> None:
        await _authorizer(resource).check_user_is_resource_creator(
            current_caller(req),
            _grant(req),
            resource_type,
            ResourceDesignation.from_params(params),
        )

    return hook


def check_access_to_restricted_resource(resource_type: PermissionResource):
    """Reject callers without restricted access from a single non-public resource."""

    async def hook(req, resp, resource, params) -> None:
        await _authorizer(resource).check_access_to_restricted_resource(
            current_caller(req),
            _grant(req),
            resource_type,
            ResourceDesignation.from_params(params),
        )

    return hook
