"""Role API resources."""

import falcon
import falcon.asgi

from edugate.application.dto.role_dto import (
    RoleCreateInput,
    RoleUpdateInput,
    parse_permission_ids,
)
from edugate.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from edugate.application.use_cases.role.add_permissions import AddPermissionsUseCase
from edugate.application.use_cases.role.create_role import CreateRoleUseCase
from edugate.application.use_cases.role.delete_role import DeleteRoleUseCase
from edugate.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from edugate.application.use_cases.role.remove_permissions import (
    RemovePermissionsUseCase,
)
from edugate.application.use_cases.role.update_role import UpdateRoleUseCase
from edugate.domain.exceptions import ValidationError
from edugate.domain.value_objects import PermissionAction as A
from edugate.domain.value_objects import PermissionResource as R
from edugate.domain.value_objects import PermissionScope as S
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.interfaces.api.hooks import (
    check_user_is_resource_creator,
    current_caller,
    require_permission,
)
from edugate.interfaces.api.resources.serializers import permission_media, role_media


def parse_id(value: str, kind: str = "role") -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {kind} ID: {kind} ID must be an integer.") from None


async def read_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object.")
    return body


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        authorizer: Authorizer,
        list_roles: ListRolesUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self.authorizer = authorizer
        self._list = list_roles
        self._create = create_role

    @falcon.before(require_permission(A.READ, S.ANY, R.ROLE))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles."""
        roles = await self._list.execute()
        resp.media = {"total_count": len(roles), "items": [role_media(r) for r in roles]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.CREATE, S.ANY, R.ROLE))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role owned by the caller."""
        body = await read_body(req)
        role = await self._create.execute(
            current_caller(req).id,
            RoleCreateInput.from_body(body),
        )
        resp.media = role_media(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PATCH/DELETE /v1/roles/{id}."""

    def __init__(
        self,
        authorizer: Authorizer,
        get_role: GetRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self.authorizer = authorizer
        self._get = get_role
        self._update = update_role
        self._delete = delete_role

    @falcon.before(require_permission(A.READ, S.ANY, R.ROLE))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        role = await self._get.execute(parse_id(id))
        resp.media = role_media(role)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.UPDATE, S.OWN, R.ROLE))
    @falcon.before(check_user_is_resource_creator(R.ROLE))
    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        body = await read_body(req)
        role = await self._update.execute(
            parse_id(id),
            RoleUpdateInput.from_body(body),
        )
        resp.media = role_media(role)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.DELETE, S.OWN, R.ROLE))
    @falcon.before(check_user_is_resource_creator(R.ROLE))
    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        await self._delete.execute(parse_id(id))
        resp.status = falcon.HTTP_204


class RolePermissionsResource:
    """GET/POST/DELETE /v1/roles/{id}/permissions - list, grant, revoke."""

    def __init__(
        self,
        authorizer: Authorizer,
        list_permissions: ListPermissionsUseCase,
        add_permissions: AddPermissionsUseCase,
        remove_permissions: RemovePermissionsUseCase,
    ) -> None:
        self.authorizer = authorizer
        self._list = list_permissions
        self._add = add_permissions
        self._remove = remove_permissions

    @falcon.before(require_permission(A.READ, S.ANY, R.ROLE))
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str
    ) -> None:
        """Permissions currently granted, read from the database."""
        permissions = await self._list.execute(parse_id(id))
        resp.media = {
            "total_count": len(permissions),
            "items": [permission_media(p) for p in permissions],
        }
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.CREATE, S.ANY, R.ROLE))
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str
    ) -> None:
        """Grant `{"permissions": [ids]}`."""
        ids = parse_permission_ids(await read_body(req))
        await self._add.execute(parse_id(id), ids)
        resp.status = falcon.HTTP_204

    @falcon.before(require_permission(A.DELETE, S.ANY, R.ROLE))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str
    ) -> None:
        """Revoke `{"permissions": [ids]}`."""
        ids = parse_permission_ids(await read_body(req))
        await self._remove.execute(parse_id(id), ids)
        resp.status = falcon.HTTP_204
