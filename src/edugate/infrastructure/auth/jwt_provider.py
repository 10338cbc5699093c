"""Signed session tokens (JWT) carrying the user and role ids."""

import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path

import jwt

from edugate.application.ports import TokenClaims
from edugate.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class JWTProvider:
    """Issues and verifies session tokens.

    Asymmetric algorithms (ES*/RS*) sign with the private key and verify with
    the public key; HS* algorithms use the shared secret for both.
    """

    def __init__(
        self,
        algorithm: str,
        signing_key: str | bytes,
        verifying_key: str | bytes,
        expires_in_days: int = 90,
    ) -> None:
        self._algorithm = algorithm
        self._signing_key = signing_key
        self._verifying_key = verifying_key
        self._expires_in = timedelta(days=expires_in_days)

    @classmethod
    def from_settings(cls, settings) -> "JWTProvider":
        if settings.jwt_algorithm.startswith("HS"):
            if not settings.jwt_secret:
                raise ConfigurationError(
                    f"jwt_secret is required for {settings.jwt_algorithm}"
                )
            signing_key = verifying_key = settings.jwt_secret
        else:
            if not settings.jwt_public_key_path:
                raise ConfigurationError(
                    f"jwt_public_key_path is required for {settings.jwt_algorithm}"
                )
            signing_key = (
                Path(settings.jwt_private_key_path).read_bytes()
                if settings.jwt_private_key_path
                else b""
            )
            verifying_key = Path(settings.jwt_public_key_path).read_bytes()
        return cls(
            algorithm=settings.jwt_algorithm,
            signing_key=signing_key,
            verifying_key=verifying_key,
            expires_in_days=settings.jwt_expires_in_days,
        )

    def create_token(self, user_id: int, role_id: int) -> str:
        """Sign a token for the user; expires after the configured days."""
        now = datetime.now(UTC)
        payload = {
            "id": user_id,
            "roleId": role_id,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._signing_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenClaims | None:
        """Verify signature and expiry; return claims or None."""
        try:
            payload = jwt.decode(
                token,
                self._verifying_key,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as e:
            logger.info("Rejected session token: %s", e)
            return None

        user_id = payload.get("id")
        role_id = payload.get("roleId")
        if not isinstance(user_id, int) or not isinstance(role_id, int):
            logger.info("Rejected session token: missing id or roleId claim")
            return None
        return TokenClaims(user_id=user_id, role_id=role_id)
