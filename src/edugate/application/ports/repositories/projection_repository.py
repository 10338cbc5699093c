"""Narrow projection port used by ownership and visibility checks."""

from typing import Protocol

from edugate.domain.entities import ResourceProjection
from edugate.domain.value_objects import PermissionResource


class ProjectionRepository(Protocol):
    """Port that never fetches a full resource row.

    `creator_id_*` raise NotFound for a missing row and return None for an
    ownerless one.
    """

    async def creator_id_by_id(
        self, resource: PermissionResource, resource_id: int
    ) -> int | None: ...

    async def creator_id_by_name(
        self, resource: PermissionResource, name: str
    ) -> int | None: ...

    async def projection_by_id(
        self, resource: PermissionResource, resource_id: int
    ) -> ResourceProjection | None: ...

    async def projection_by_name(
        self, resource: PermissionResource, name: str
    ) -> ResourceProjection | None: ...
