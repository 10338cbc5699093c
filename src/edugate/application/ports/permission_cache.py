"""Permission cache port - refreshed after grants and revokes."""

from typing import Protocol


class PermissionCacheRefresher(Protocol):
    """Port for rebuilding the role → permissions projection."""

    async def refresh(self) -> None: ...
