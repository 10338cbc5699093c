"""Notification topic entity."""

from dataclasses import dataclass


@dataclass
class Topic:
    """Push-notification topic; non-public topics are restricted."""

    id: int
    name: str
    description: str | None = None
    public: bool = True
    creator_id: int | None = None
