"""Minimal projection fetched for restricted-visibility checks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceProjection:
    """`public` is None for resource types that cannot be restricted."""

    id: int
    name: str | None = None
    public: bool | None = None

    @property
    def is_restricted(self) -> bool:
        return self.public is False
