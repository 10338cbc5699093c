"""Scope resolution - does the caller's role cover the required scope."""

import logging

from edugate.domain.entities import Caller
from edugate.domain.exceptions import InsufficientScope, NoPermission
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    ScopeGrant,
    most_permissive,
)
from edugate.infrastructure.permission.permission_cache import PermissionCache

logger = logging.getLogger(__name__)


class ScopeResolver:
    """Pure per-request decision over the permission cache."""

    def __init__(self, permission_cache: PermissionCache, super_role_id: int = 0) -> None:
        self._cache = permission_cache
        self._super_role_id = super_role_id

    def resolve(
        self,
        caller: Caller,
        action: PermissionAction,
        required_scope: PermissionScope,
        resource: PermissionResource,
    ) -> ScopeGrant:
        """Return the caller's grant or raise NoPermission / InsufficientScope."""
        if caller.role_id == self._super_role_id:
            return ScopeGrant.super_role()

        scopes = self._cache.scopes_for(caller.role_name, action, resource)
        resolved = most_permissive(scopes)
        if resolved is None:
            logger.info(
                "Denied %s %s to user %s (%s): no permission",
                action, resource, caller.id, caller.role_name,
            )
            raise NoPermission(
                f"You don't have any permission to {action.value} {resource.value}."
            )

        if not resolved.dominates(required_scope):
            logger.info(
                "Denied %s %s to user %s (%s): holds %s, needs %s",
                action, resource, caller.id, caller.role_name, resolved, required_scope,
            )
            raise InsufficientScope(
                "You don't have enough permissions to do this action!"
            )

        return ScopeGrant(
            scope=resolved,
            restricted_visibility=PermissionScope.RESTRICTED in scopes,
        )
