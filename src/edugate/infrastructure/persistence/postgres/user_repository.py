"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from edugate.domain.entities import User


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            "SELECT id, role_id, email, given_name, family_name FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return User(id=r[0], role_id=r[1], email=r[2], given_name=r[3], family_name=r[4])

    async def update_role(self, user_id: int, role_id: int) -> None:
        """Move user to another role."""
        await self._conn.execute(
            "UPDATE app_user SET role_id = %s, updated_at = now() WHERE id = %s",
            (role_id, user_id),
        )
