"""Lecture use cases.

Authorization happens before these run; they only load and persist.
"""

import logging

from edugate.application.dto.content_dto import LectureUpdateInput
from edugate.domain.entities import Lecture
from edugate.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class GetLectureUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, lecture_id: int) -> Lecture:
        async with self._uow_factory() as uow:
            lecture = await uow.lectures.get_by_id(lecture_id)
        if not lecture:
            raise NotFound("Lecture", lecture_id)
        return lecture


class UpdateLectureUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, lecture_id: int, input_data: LectureUpdateInput) -> Lecture:
        async with self._uow_factory() as uow:
            lecture = await uow.lectures.get_by_id(lecture_id)
            if not lecture:
                raise NotFound("Lecture", lecture_id)
            if input_data.title is not None:
                title = input_data.title.strip()
                if not title:
                    raise ValidationError("Title is required.")
                lecture.title = title
            if input_data.description is not None:
                lecture.description = input_data.description
            await uow.lectures.update(lecture)
        return lecture


class DeleteLectureUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, lecture_id: int) -> None:
        async with self._uow_factory() as uow:
            if not await uow.lectures.get_by_id(lecture_id):
                raise NotFound("Lecture", lecture_id)
            await uow.lectures.delete(lecture_id)
        logger.info("Lecture %s deleted", lecture_id)
