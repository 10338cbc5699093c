"""Session API resources."""

import falcon
import falcon.asgi

from edugate.interfaces.api.hooks import current_caller
from edugate.interfaces.api.middleware.auth import TOKEN_COOKIE


class LogoutResource:
    """POST /v1/auth/logout - clear the session cookie."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        current_caller(req)
        resp.unset_cookie(TOKEN_COOKIE, path="/")
        resp.media = {"status": "success", "message": "Logged out successfully."}
        resp.status = falcon.HTTP_200
