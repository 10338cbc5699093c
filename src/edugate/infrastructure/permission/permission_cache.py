"""Process-wide projection of role name → granted permission triples."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    most_permissive,
)

logger = logging.getLogger(__name__)

Triple = tuple[PermissionAction, PermissionScope, PermissionResource]

_EMPTY: Mapping[str, frozenset[Triple]] = MappingProxyType({})


class PermissionCache:
    """Immutable snapshot swapped in by `refresh()`.

    Readers only ever see a fully built snapshot; a refresh builds a new one
    from persisted ground truth and replaces the reference. When two refreshes
    race, the last to finish wins.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory
        self._snapshot: Mapping[str, frozenset[Triple]] = _EMPTY

    async def refresh(self) -> None:
        """Rebuild the whole mapping from the role store."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_with_permissions()

        snapshot = MappingProxyType(
            {
                entry.role.name: frozenset(p.triple for p in entry.permissions)
                for entry in roles
            }
        )
        self._snapshot = snapshot
        logger.info(
            "Permission cache refreshed: %d roles, %d grants",
            len(snapshot),
            sum(len(v) for v in snapshot.values()),
        )

    def scopes_for(
        self,
        role_name: str,
        action: PermissionAction,
        resource: PermissionResource,
    ) -> frozenset[PermissionScope]:
        """Every scope the role holds for (action, resource)."""
        granted = self._snapshot.get(role_name, frozenset())
        return frozenset(
            scope for a, scope, r in granted if a is action and r is resource
        )

    def lookup(
        self,
        role_name: str,
        action: PermissionAction,
        resource: PermissionResource,
    ) -> PermissionScope | None:
        """Most permissive scope held for (action, resource), or None."""
        return most_permissive(self.scopes_for(role_name, action, resource))

    def roles(self) -> list[str]:
        return sorted(self._snapshot)
