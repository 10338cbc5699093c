"""Health check endpoints."""

import falcon.asgi

from edugate.infrastructure.permission.permission_cache import PermissionCache


class HealthResource:
    """Liveness and readiness; ready once the permission cache is filled."""

    def __init__(self, permission_cache: PermissionCache) -> None:
        self._permission_cache = permission_cache

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness."""
        roles = self._permission_cache.roles()
        if not roles:
            resp.media = {"status": "starting"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "roles": len(roles)}
        resp.status = falcon.HTTP_200
