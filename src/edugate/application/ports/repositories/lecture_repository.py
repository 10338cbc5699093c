"""Lecture repository port."""

from typing import Protocol

from edugate.domain.entities import Lecture


class LectureRepository(Protocol):
    """Port for lecture persistence."""

    async def get_by_id(self, lecture_id: int) -> Lecture | None: ...

    async def update(self, lecture: Lecture) -> None: ...

    async def delete(self, lecture_id: int) -> None: ...
