"""Permission catalog API resources."""

import falcon
import falcon.asgi

from edugate.application.use_cases.permission.list_permissions import (
    GetPermissionUseCase,
    ListPermissionsUseCase,
)
from edugate.domain.value_objects import PermissionAction as A
from edugate.domain.value_objects import PermissionResource as R
from edugate.domain.value_objects import PermissionScope as S
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.interfaces.api.hooks import require_permission
from edugate.interfaces.api.resources.roles import parse_id
from edugate.interfaces.api.resources.serializers import permission_media


class PermissionsResource:
    """GET /v1/permissions - the whole catalog, or one role's via `?role_id=`."""

    def __init__(self, authorizer: Authorizer, list_permissions: ListPermissionsUseCase) -> None:
        self.authorizer = authorizer
        self._list = list_permissions

    @falcon.before(require_permission(A.READ, S.ANY, R.ROLE))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        role_id = req.get_param("role_id")
        permissions = await self._list.execute(
            parse_id(role_id) if role_id is not None else None
        )
        resp.media = {
            "total_count": len(permissions),
            "items": [permission_media(p) for p in permissions],
        }
        resp.status = falcon.HTTP_200


class SinglePermissionResource:
    """GET /v1/permissions/{id}."""

    def __init__(self, authorizer: Authorizer, get_permission: GetPermissionUseCase) -> None:
        self.authorizer = authorizer
        self._get = get_permission

    @falcon.before(require_permission(A.READ, S.ANY, R.ROLE))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        permission = await self._get.execute(parse_id(id, "permission"))
        resp.media = permission_media(permission)
        resp.status = falcon.HTTP_200
