"""Resource lookup port - what a resource type implements to be guarded."""

from typing import Protocol, runtime_checkable

from edugate.domain.entities import ResourceProjection


@runtime_checkable
class ResourceLookup(Protocol):
    """Narrow lookups by id or natural-key name for one resource type.

    `find_creator_id_*` raise NotFound when the instance does not exist and
    return None (or 0) for a resource with no recorded creator.
    """

    async def find_creator_id_by_id(self, resource_id: int) -> int | None: ...

    async def find_creator_id_by_name(self, name: str) -> int | None: ...

    async def find_one_by_id(self, resource_id: int) -> ResourceProjection | None: ...

    async def find_one_by_name(self, name: str) -> ResourceProjection | None: ...
