"""User API resources."""

import falcon
import falcon.asgi

from edugate.application.dto.role_dto import parse_role_id
from edugate.application.use_cases.user.assign_role import AssignRoleUseCase
from edugate.domain.value_objects import PermissionAction as A
from edugate.domain.value_objects import PermissionResource as R
from edugate.domain.value_objects import PermissionScope as S
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.interfaces.api.hooks import require_permission
from edugate.interfaces.api.resources.roles import parse_id, read_body
from edugate.interfaces.api.resources.serializers import user_media


class UserRoleResource:
    """PATCH /v1/users/{id}/role - move a user to another role.

    There is no dedicated assign action; being able to create roles is what
    allows handing them out.
    """

    def __init__(self, authorizer: Authorizer, assign_role: AssignRoleUseCase) -> None:
        self.authorizer = authorizer
        self._assign = assign_role

    @falcon.before(require_permission(A.CREATE, S.ANY, R.ROLE))
    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        body = await read_body(req)
        user = await self._assign.execute(parse_id(id, "user"), parse_role_id(body))
        resp.media = user_media(user)
        resp.status = falcon.HTTP_200
