"""PostgreSQL lecture repository implementation."""

from psycopg import AsyncConnection

from edugate.domain.entities import Lecture


class PostgresLectureRepository:
    """Lecture repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, lecture_id: int) -> Lecture | None:
        """Get lecture by id."""
        cur = await self._conn.execute(
            "SELECT id, subject_id, title, description, creator_id FROM lecture WHERE id = %s",
            (lecture_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Lecture(id=r[0], subject_id=r[1], title=r[2], description=r[3], creator_id=r[4])

    async def update(self, lecture: Lecture) -> None:
        """Update lecture."""
        await self._conn.execute(
            "UPDATE lecture SET title = %s, description = %s, updated_at = now() WHERE id = %s",
            (lecture.title, lecture.description, lecture.id),
        )

    async def delete(self, lecture_id: int) -> None:
        """Delete lecture."""
        await self._conn.execute("DELETE FROM lecture WHERE id = %s", (lecture_id,))
