"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import ForeignKeyViolation, UniqueViolation

from edugate.domain.entities import Permission, Role, RoleWithPermissions
from edugate.domain.exceptions import Conflict, NotFound
from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)

_ROLE_COLUMNS = "id, name, description, creator_id"


def _role(r) -> Role:
    return Role(id=r[0], name=r[1], description=r[2], creator_id=r[3])


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: int) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return _role(r) if r else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _role(r) if r else None

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_ROLE_COLUMNS} FROM role ORDER BY id")
        rows = await cur.fetchall()
        return [_role(r) for r in rows]

    async def list_with_permissions(self) -> list[RoleWithPermissions]:
        """List every role with its granted permissions (roles without any included)."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name, r.description, r.creator_id, "
            "p.id, p.action, p.scope, p.resource, p.description "
            "FROM role r "
            "LEFT JOIN role_permission rp ON rp.role_id = r.id "
            "LEFT JOIN permission p ON p.id = rp.permission_id "
            "ORDER BY r.id, p.id"
        )
        rows = await cur.fetchall()
        by_id: dict[int, RoleWithPermissions] = {}
        for r in rows:
            entry = by_id.get(r[0])
            if entry is None:
                entry = by_id[r[0]] = RoleWithPermissions(role=_role(r[:4]))
            if r[4] is not None:
                entry.permissions.append(
                    Permission(
                        id=r[4],
                        action=PermissionAction(r[5]),
                        scope=PermissionScope(r[6]),
                        resource=PermissionResource(r[7]),
                        description=r[8],
                    )
                )
        return list(by_id.values())

    async def create(
        self,
        name: str,
        description: str | None = None,
        creator_id: int | None = None,
        role_id: int | None = None,
    ) -> Role:
        """Create role; the id is generated unless given."""
        try:
            if role_id is None:
                cur = await self._conn.execute(
                    "INSERT INTO role (name, description, creator_id) "
                    f"VALUES (%s, %s, %s) RETURNING {_ROLE_COLUMNS}",
                    (name, description, creator_id),
                )
            else:
                cur = await self._conn.execute(
                    "INSERT INTO role (id, name, description, creator_id) "
                    f"VALUES (%s, %s, %s, %s) RETURNING {_ROLE_COLUMNS}",
                    (role_id, name, description, creator_id),
                )
                row = await cur.fetchone()
                # Keep the identity sequence ahead of explicitly seeded ids.
                await self._conn.execute(
                    "SELECT setval(pg_get_serial_sequence('role', 'id'), "
                    "GREATEST((SELECT max(id) FROM role), 1))"
                )
                return _role(row)
        except UniqueViolation as e:
            raise Conflict(f"Role '{name}' already exists") from e
        return _role(await cur.fetchone())

    async def update(self, role: Role) -> None:
        """Update role."""
        try:
            await self._conn.execute(
                "UPDATE role SET name = %s, description = %s, updated_at = now() WHERE id = %s",
                (role.name, role.description, role.id),
            )
        except UniqueViolation as e:
            raise Conflict(f"Role '{role.name}' already exists") from e

    async def delete(self, role_id: int) -> None:
        """Delete role; its grants cascade."""
        try:
            await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))
        except ForeignKeyViolation as e:
            raise Conflict(f"Role {role_id} is still assigned to users") from e

    async def add_permissions(self, role_id: int, permission_ids: list[int]) -> None:
        """Insert grants; an existing grant is a uniqueness error."""
        try:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s)",
                    [(role_id, pid) for pid in permission_ids],
                )
        except UniqueViolation as e:
            raise Conflict(f"Role {role_id} already holds one of {permission_ids}") from e
        except ForeignKeyViolation as e:
            raise NotFound("Permission", permission_ids) from e

    async def remove_permissions(self, role_id: int, permission_ids: list[int]) -> int:
        """Delete grants; returns how many rows were removed."""
        cur = await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s AND permission_id = ANY(%s)",
            (role_id, permission_ids),
        )
        return cur.rowcount
