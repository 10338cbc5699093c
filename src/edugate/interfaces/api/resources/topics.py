"""Notification topic API resources."""

import falcon
import falcon.asgi

from edugate.application.dto.content_dto import TopicUpdateInput
from edugate.application.use_cases.topic.manage_topic import (
    DeleteTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    UpdateTopicUseCase,
)
from edugate.domain.value_objects import PermissionAction as A
from edugate.domain.value_objects import PermissionResource as R
from edugate.domain.value_objects import PermissionScope as S
from edugate.infrastructure.permission.authorizer import Authorizer
from edugate.interfaces.api.hooks import (
    check_access_to_restricted_resource,
    check_user_is_resource_creator,
    require_permission,
)
from edugate.interfaces.api.resources.roles import read_body
from edugate.interfaces.api.resources.serializers import topic_media


class TopicsResource:
    """GET /v1/topics - public topics, plus restricted ones for privileged roles."""

    def __init__(self, authorizer: Authorizer, list_topics: ListTopicsUseCase) -> None:
        self.authorizer = authorizer
        self._list = list_topics

    @falcon.before(require_permission(A.READ, S.OWN, R.TOPIC))
    @falcon.before(check_access_to_restricted_resource(R.TOPIC))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        topics = await self._list.execute(
            include_restricted=req.context.can_access_restricted
        )
        resp.media = {"total_count": len(topics), "items": [topic_media(t) for t in topics]}
        resp.status = falcon.HTTP_200


class TopicResource:
    """GET/PATCH/DELETE /v1/topics/{name}; topics are keyed by name."""

    def __init__(
        self,
        authorizer: Authorizer,
        get_topic: GetTopicUseCase,
        update_topic: UpdateTopicUseCase,
        delete_topic: DeleteTopicUseCase,
    ) -> None:
        self.authorizer = authorizer
        self._get = get_topic
        self._update = update_topic
        self._delete = delete_topic

    @falcon.before(require_permission(A.READ, S.OWN, R.TOPIC))
    @falcon.before(check_access_to_restricted_resource(R.TOPIC))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str) -> None:
        topic = await self._get.execute(name)
        resp.media = topic_media(topic)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.UPDATE, S.OWN, R.TOPIC))
    @falcon.before(check_access_to_restricted_resource(R.TOPIC))
    @falcon.before(check_user_is_resource_creator(R.TOPIC))
    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str) -> None:
        body = await read_body(req)
        topic = await self._update.execute(name, TopicUpdateInput.from_body(body))
        resp.media = topic_media(topic)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission(A.DELETE, S.OWN, R.TOPIC))
    @falcon.before(check_user_is_resource_creator(R.TOPIC))
    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str) -> None:
        await self._delete.execute(name)
        resp.status = falcon.HTTP_204
