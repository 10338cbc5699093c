"""Outcome of scope resolution for one request."""

from dataclasses import dataclass

from edugate.domain.value_objects.permission_scope import PermissionScope


@dataclass(frozen=True)
class ScopeGrant:
    """Scope a caller was granted for (action, resource).

    `unconditional` marks the super-role, which bypasses ownership and
    visibility checks. `restricted_visibility` is set when the role holds a
    RESTRICTED permission for the pair, even if a broader scope won.
    """

    scope: PermissionScope
    unconditional: bool = False
    restricted_visibility: bool = False

    @classmethod
    def super_role(cls) -> "ScopeGrant":
        return cls(
            scope=PermissionScope.ANY,
            unconditional=True,
            restricted_visibility=True,
        )

    @property
    def requires_ownership(self) -> bool:
        return not self.unconditional and self.scope is PermissionScope.OWN

    @property
    def can_access_restricted(self) -> bool:
        return (
            self.unconditional
            or self.scope is PermissionScope.RESTRICTED
            or self.restricted_visibility
        )
