"""PostgreSQL narrow projections for ownership and visibility checks."""

from dataclasses import dataclass

from psycopg import AsyncConnection, sql

from edugate.domain.entities import ResourceProjection
from edugate.domain.exceptions import ConfigurationError, NotFound
from edugate.domain.value_objects import PermissionResource


@dataclass(frozen=True)
class ResourceTable:
    """Where a resource type lives and which facets it has.

    `name_column` is set only where that column is unique.
    """

    table: str
    name_column: str | None = "name"
    has_public: bool = False


RESOURCE_TABLES: dict[PermissionResource, ResourceTable] = {
    PermissionResource.ROLE: ResourceTable("role"),
    PermissionResource.FACULTY: ResourceTable("faculty"),
    PermissionResource.YEAR: ResourceTable("year", name_column=None),
    PermissionResource.MODULE: ResourceTable("module", name_column=None),
    PermissionResource.SUBJECT: ResourceTable("subject", name_column=None),
    PermissionResource.LECTURE: ResourceTable("lecture", name_column=None),
    PermissionResource.TOPIC: ResourceTable("topic", has_public=True),
}


def _table(resource: PermissionResource) -> ResourceTable:
    try:
        return RESOURCE_TABLES[resource]
    except KeyError:
        raise ConfigurationError(f"No table mapped for {resource.value}") from None


def _name_column(resource: PermissionResource, table: ResourceTable) -> str:
    if table.name_column is None:
        raise ConfigurationError(f"{resource.value} cannot be looked up by name")
    return table.name_column


class PostgresProjectionRepository:
    """Selects only creator_id or (id, name, public), never the full row."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _creator_id(self, resource: PermissionResource, column: str, key) -> int | None:
        table = _table(resource)
        query = sql.SQL("SELECT creator_id FROM {} WHERE {} = %s").format(
            sql.Identifier(table.table), sql.Identifier(column)
        )
        cur = await self._conn.execute(query, (key,))
        r = await cur.fetchone()
        if not r:
            raise NotFound(resource.value.capitalize(), key)
        return r[0]

    async def creator_id_by_id(self, resource: PermissionResource, resource_id: int) -> int | None:
        """Creator of record by id; None for ownerless rows."""
        return await self._creator_id(resource, "id", resource_id)

    async def creator_id_by_name(self, resource: PermissionResource, name: str) -> int | None:
        """Creator of record by natural key."""
        column = _name_column(resource, _table(resource))
        return await self._creator_id(resource, column, name)

    async def _projection(
        self, resource: PermissionResource, column: str, key
    ) -> ResourceProjection | None:
        table = _table(resource)
        name = sql.Identifier(table.name_column) if table.name_column else sql.SQL("NULL")
        public = sql.SQL("public") if table.has_public else sql.SQL("NULL")
        query = sql.SQL("SELECT id, {}, {} FROM {} WHERE {} = %s").format(
            name, public, sql.Identifier(table.table), sql.Identifier(column)
        )
        cur = await self._conn.execute(query, (key,))
        r = await cur.fetchone()
        if not r:
            return None
        return ResourceProjection(id=r[0], name=r[1], public=r[2])

    async def projection_by_id(
        self, resource: PermissionResource, resource_id: int
    ) -> ResourceProjection | None:
        """(id, name, public) by id."""
        return await self._projection(resource, "id", resource_id)

    async def projection_by_name(
        self, resource: PermissionResource, name: str
    ) -> ResourceProjection | None:
        """(id, name, public) by natural key."""
        column = _name_column(resource, _table(resource))
        return await self._projection(resource, column, name)
