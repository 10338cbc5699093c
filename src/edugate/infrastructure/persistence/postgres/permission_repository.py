"""PostgreSQL permission repository implementation."""

from psycopg import AsyncConnection

from edugate.domain.entities import Permission
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)

_COLUMNS = "p.id, p.action, p.scope, p.resource, p.description"


def _permission(r) -> Permission:
    return Permission(
        id=r[0],
        action=PermissionAction(r[1]),
        scope=PermissionScope(r[2]),
        resource=PermissionResource(r[3]),
        description=r[4],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: int) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission p WHERE p.id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _permission(r) if r else None

    async def get_by_triple(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
    ) -> Permission | None:
        """Get the unique permission for (action, scope, resource)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission p "
            "WHERE p.action = %s AND p.scope = %s AND p.resource = %s",
            (action.value, scope.value, resource.value),
        )
        r = await cur.fetchone()
        return _permission(r) if r else None

    async def list_all(self) -> list[Permission]:
        """List the whole catalog."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM permission p ORDER BY p.id")
        rows = await cur.fetchall()
        return [_permission(r) for r in rows]

    async def list_for_role(self, role_id: int) -> list[Permission]:
        """List permissions currently granted to a role."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_permission rp "
            "JOIN permission p ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s ORDER BY p.id",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [_permission(r) for r in rows]

    async def upsert(
        self,
        action: PermissionAction,
        scope: PermissionScope,
        resource: PermissionResource,
        description: str | None,
    ) -> Permission:
        """Insert the triple if missing; an existing row is returned unchanged."""
        await self._conn.execute(
            "INSERT INTO permission (action, scope, resource, description) "
            "VALUES (%s, %s, %s, %s) "
            "ON CONFLICT (action, scope, resource) DO NOTHING",
            (action.value, scope.value, resource.value, description),
        )
        return await self.get_by_triple(action, scope, resource)
