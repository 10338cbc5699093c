"""Identity of a single resource instance taken from route parameters."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResourceDesignation:
    """Numeric id or natural-key name of a resource instance."""

    id: int | None = None
    name: str | None = None

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> "ResourceDesignation":
        """Extract `id` (positive integer) and `name` (non-empty string)."""
        resource_id: int | None = None
        raw_id = params.get("id")
        if raw_id is not None:
            try:
                resource_id = int(raw_id)
            except (TypeError, ValueError):
                resource_id = None
            if resource_id is not None and resource_id <= 0:
                resource_id = None

        name = params.get("name")
        if not isinstance(name, str) or not name:
            name = None

        return cls(id=resource_id, name=name)

    @property
    def is_single(self) -> bool:
        return self.id is not None or self.name is not None
