"""Session token port."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TokenClaims:
    """Verified session token payload."""

    user_id: int
    role_id: int


class TokenProvider(Protocol):
    """Signs and verifies session tokens."""

    def create_token(self, user_id: int, role_id: int) -> str: ...

    def decode_token(self, token: str) -> TokenClaims | None: ...
