"""Registry of resource types that take part in instance-level checks."""

from edugate.application.ports import ResourceLookup
from edugate.domain.exceptions import ConfigurationError
from edugate.domain.value_objects import PermissionResource


class ResourceLookupRegistry:
    """Maps a resource type to its lookup; validated when registering."""

    def __init__(self) -> None:
        self._lookups: dict[PermissionResource, ResourceLookup] = {}

    def register(self, resource: PermissionResource, lookup: object) -> None:
        if not isinstance(lookup, ResourceLookup):
            raise ConfigurationError(
                f"{type(lookup).__name__} does not implement the resource lookup "
                f"contract required for {resource.value}"
            )
        self._lookups[resource] = lookup

    def get(self, resource: PermissionResource) -> ResourceLookup:
        try:
            return self._lookups[resource]
        except KeyError:
            raise ConfigurationError(
                f"No resource lookup registered for {resource.value}; "
                "cannot continue with permission checks."
            ) from None

    def __contains__(self, resource: PermissionResource) -> bool:
        return resource in self._lookups
