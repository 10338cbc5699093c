"""Resource lookups backed by the projection repository."""

from edugate.domain.entities import ResourceProjection
from edugate.domain.value_objects import PermissionResource
from edugate.infrastructure.permission.resource_lookup_registry import (
    ResourceLookupRegistry,
)


class UnitOfWorkResourceLookup:
    """Implements the resource lookup contract for one resource type.

    Each call opens its own unit of work; guards run before business logic.
    """

    def __init__(self, unit_of_work_factory: type, resource: PermissionResource) -> None:
        self._uow_factory = unit_of_work_factory
        self._resource = resource

    async def find_creator_id_by_id(self, resource_id: int) -> int | None:
        async with self._uow_factory() as uow:
            return await uow.projections.creator_id_by_id(self._resource, resource_id)

    async def find_creator_id_by_name(self, name: str) -> int | None:
        async with self._uow_factory() as uow:
            return await uow.projections.creator_id_by_name(self._resource, name)

    async def find_one_by_id(self, resource_id: int) -> ResourceProjection | None:
        async with self._uow_factory() as uow:
            return await uow.projections.projection_by_id(self._resource, resource_id)

    async def find_one_by_name(self, name: str) -> ResourceProjection | None:
        async with self._uow_factory() as uow:
            return await uow.projections.projection_by_name(self._resource, name)


def build_lookup_registry(unit_of_work_factory: type, resources) -> ResourceLookupRegistry:
    """Registry with a unit-of-work backed lookup for each resource type."""
    registry = ResourceLookupRegistry()
    for resource in resources:
        registry.register(resource, UnitOfWorkResourceLookup(unit_of_work_factory, resource))
    return registry
