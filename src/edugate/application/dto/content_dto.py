"""Lecture and topic DTOs."""

from dataclasses import dataclass

from edugate.application.dto.fields import optional_string
from edugate.domain.exceptions import ValidationError


@dataclass
class LectureUpdateInput:
    """Partial lecture update; None leaves the field unchanged."""

    title: str | None = None
    description: str | None = None

    @classmethod
    def from_body(cls, body: dict) -> "LectureUpdateInput":
        return cls(
            title=optional_string(body, "title"),
            description=optional_string(body, "description"),
        )


@dataclass
class TopicUpdateInput:
    """Partial topic update; None leaves the field unchanged."""

    description: str | None = None
    public: bool | None = None

    @classmethod
    def from_body(cls, body: dict) -> "TopicUpdateInput":
        public = body.get("public")
        if public is not None and not isinstance(public, bool):
            raise ValidationError("Field 'public' must be a boolean.")
        return cls(description=optional_string(body, "description"), public=public)
