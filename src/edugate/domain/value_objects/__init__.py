"""Domain value objects."""

from edugate.domain.value_objects.permission_action import PermissionAction
from edugate.domain.value_objects.permission_resource import PermissionResource
from edugate.domain.value_objects.permission_scope import (
    PermissionScope,
    most_permissive,
)
from edugate.domain.value_objects.resource_designation import ResourceDesignation
from edugate.domain.value_objects.scope_grant import ScopeGrant

__all__ = [
    "PermissionAction",
    "PermissionResource",
    "PermissionScope",
    "ResourceDesignation",
    "ScopeGrant",
    "most_permissive",
]
