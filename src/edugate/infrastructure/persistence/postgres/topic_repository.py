"""PostgreSQL topic repository implementation."""

from psycopg import AsyncConnection

from edugate.domain.entities import Topic

_COLUMNS = "id, name, description, public, creator_id"


def _topic(r) -> Topic:
    return Topic(id=r[0], name=r[1], description=r[2], public=r[3], creator_id=r[4])


class PostgresTopicRepository:
    """Topic repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_name(self, name: str) -> Topic | None:
        """Get topic by its unique name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM topic WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _topic(r) if r else None

    async def list(self, *, public_only: bool) -> list[Topic]:
        """List topics, optionally only the public ones."""
        query = f"SELECT {_COLUMNS} FROM topic"
        if public_only:
            query += " WHERE public"
        cur = await self._conn.execute(query + " ORDER BY name")
        rows = await cur.fetchall()
        return [_topic(r) for r in rows]

    async def update(self, topic: Topic) -> None:
        """Update topic."""
        await self._conn.execute(
            "UPDATE topic SET description = %s, public = %s, updated_at = now() WHERE id = %s",
            (topic.description, topic.public, topic.id),
        )

    async def delete(self, topic_id: int) -> None:
        """Delete topic."""
        await self._conn.execute("DELETE FROM topic WHERE id = %s", (topic_id,))
