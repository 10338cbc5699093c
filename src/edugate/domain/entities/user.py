"""User entity and the authenticated caller."""

from dataclasses import dataclass


@dataclass
class User:
    """Platform user - one role per user."""

    id: int
    role_id: int
    email: str | None = None
    given_name: str | None = None
    family_name: str | None = None


@dataclass(frozen=True)
class Caller:
    """Authenticated user as seen by the authorization engine."""

    id: int
    role_id: int
    role_name: str
