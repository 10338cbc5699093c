"""Auth middleware - resolves the session token to a caller."""

import logging

import falcon.asgi

from edugate.application.ports import TokenProvider
from edugate.application.use_cases.auth.authenticate_caller import (
    AuthenticateCallerUseCase,
)
from edugate.domain.exceptions import Unauthenticated

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "jwt"


def extract_token(req: falcon.asgi.Request) -> str | None:
    """Session cookie first, then an `Authorization: Bearer` header."""
    cookies = req.get_cookie_values(TOKEN_COOKIE)
    if cookies and cookies[0]:
        return cookies[0]
    auth = req.get_header("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth[7:].strip() or None
    return None


class AuthMiddleware:
    """Sets `req.context.caller`, or None with `req.context.auth_error`.

    Rejection happens in the permission hooks, so public routes such as
    health checks stay reachable without a token.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        authenticate_caller: AuthenticateCallerUseCase,
    ) -> None:
        self._tokens = token_provider
        self._authenticate = authenticate_caller

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.caller = None
        req.context.auth_error = None

        token = extract_token(req)
        if not token:
            return

        claims = self._tokens.decode_token(token)
        if claims is None:
            req.context.auth_error = "Invalid or expired session token."
            return

        try:
            req.context.caller = await self._authenticate.execute(claims)
        except Unauthenticated as e:
            logger.info("Token for user %s rejected: %s", claims.user_id, e)
            req.context.auth_error = str(e)
