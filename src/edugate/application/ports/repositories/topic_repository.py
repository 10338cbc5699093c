"""Topic repository port."""

from typing import Protocol

from edugate.domain.entities import Topic


class TopicRepository(Protocol):
    """Port for notification topic persistence."""

    async def get_by_name(self, name: str) -> Topic | None: ...

    async def list(self, *, public_only: bool) -> list[Topic]: ...

    async def update(self, topic: Topic) -> None: ...

    async def delete(self, topic_id: int) -> None: ...
