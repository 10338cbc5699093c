"""Notification topic use cases."""

import logging

from edugate.application.dto.content_dto import TopicUpdateInput
from edugate.domain.entities import Topic
from edugate.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class ListTopicsUseCase:
    """List topics; callers without restricted access only see public ones."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, *, include_restricted: bool) -> list[Topic]:
        async with self._uow_factory() as uow:
            return await uow.topics.list(public_only=not include_restricted)


class GetTopicUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, name: str) -> Topic:
        async with self._uow_factory() as uow:
            topic = await uow.topics.get_by_name(name)
        if not topic:
            raise NotFound("Topic", name)
        return topic


class UpdateTopicUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, name: str, input_data: TopicUpdateInput) -> Topic:
        async with self._uow_factory() as uow:
            topic = await uow.topics.get_by_name(name)
            if not topic:
                raise NotFound("Topic", name)
            if input_data.description is not None:
                topic.description = input_data.description
            if input_data.public is not None:
                topic.public = input_data.public
            await uow.topics.update(topic)
        return topic


class DeleteTopicUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, name: str) -> None:
        async with self._uow_factory() as uow:
            topic = await uow.topics.get_by_name(name)
            if not topic:
                raise NotFound("Topic", name)
            await uow.topics.delete(topic.id)
        logger.info("Topic %s deleted", name)
