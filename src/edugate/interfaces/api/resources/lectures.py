"""Lecture API resources."""

import falcon
import falcon.asgi

from edugate.application.dto.content_dto import LectureUpdateInput
from edugate.application.use_cases.lecture.manage_lecture import (
    DeleteLectureUseCase,
    GetLectureUseCase,
    UpdateLectureUseCase,
)
from edugate.domain.value_objects import PermissionAction as A
from edugate.domain.value_objects import PermissionResource as R
from edugate.domain.value_objects import PermissionScope as S
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.interfaces.api.hooks import check_user_is_resource_creator, require_permission
from edugate.interfaces.api.resources.roles import parse_id, read_body
from edugate.interfaces.api.resources.serializers import lecture_media


class LectureResource:
    """GET/PATCH/DELETE /v1/lectures/{id}.

    Admins hold UPDATE/DELETE OWN LECTURE and may only touch lectures they
    created; SuperAdmins hold ANY and skip the ownership check.
    """

    def __init__(
        self,
        authorizer: Authorizer,
        get_lecture: GetLectureUseCase,
        update_lecture: UpdateLectureUseCase,
        delete_lecture: DeleteLectureUseCase,
    ) -> None:
        self.authorizer = authorizer
        self._get = get_lecture
        self._update = update_lecture
        self._delete = delete_lecture

    @falcon.before(require_permission(A.READ, S.ANY, R.LECTURE))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        lecture = await self._get.execute(parse_id(id, "lecture"))
        resp.media = lecture_media(lecture)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.UPDATE, S.OWN, R.LECTURE))
    @falcon.before(check_user_is_resource_creator(R.LECTURE))
    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        body = await read_body(req)
        lecture = await self._update.execute(
            parse_id(id, "lecture"),
            LectureUpdateInput.from_body(body),
        )
        resp.media = lecture_media(lecture)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.DELETE, S.OWN, R.LECTURE))
    @falcon.before(check_user_is_resource_creator(R.LECTURE))
    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, id: str) -> None:
        await self._delete.execute(parse_id(id, "lecture"))
        resp.status = falcon.HTTP_204
