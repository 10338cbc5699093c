"""Authorization engine facade used by the API guards."""

from edugate.domain.entities import Caller
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    ResourceDesignation,
    ScopeGrant,
)
from edugate.infrastructure.permission.ownership_check import ResourceOwnershipCheck
from edugate.infrastructure.permission.resource_lookup_registry import (
    ResourceLookupRegistry,
)
from edugate.infrastructure.permission.restricted_visibility_check import (
    RestrictedVisibilityCheck,
)
from edugate.infrastructure.permission.scope_resolver import ScopeResolver


class Authorizer:
    """Composes scope resolution with the instance-level checks."""

    def __init__(
        self,
        scope_resolver: ScopeResolver,
        lookups: ResourceLookupRegistry,
        ownership_check: ResourceOwnershipCheck | None = None,
        visibility_check: RestrictedVisibilityCheck | None = None,
    ) -> None:
        self._resolver = scope_resolver
        self._lookups = lookups
        self._ownership = ownership_check or ResourceOwnershipCheck()
        self._visibility = visibility_check or RestrictedVisibilityCheck()

    def require_permission(
        self,
        caller: Caller,
        action: PermissionAction,
        required_scope: PermissionScope,
        resource: PermissionResource,
    ) -> ScopeGrant:
        return self._resolver.resolve(caller, action, required_scope, resource)

    async def check_user_is_resource_creator(
        self,
        caller: Caller,
        grant: ScopeGrant,
        resource: PermissionResource,
        designation: ResourceDesignation,
    ) -> None:
        lookup = self._lookups.get(resource)
        await self._ownership.check(caller, grant, lookup, designation)

    async def check_access_to_restricted_resource(
        self,
        caller: Caller,
        grant: ScopeGrant,
        resource: PermissionResource,
        designation: ResourceDesignation,
    ) -> None:
        lookup = self._lookups.get(resource)
        await self._visibility.check(caller, grant, lookup, designation)
