"""Repository ports."""

from edugate.application.ports.repositories.lecture_repository import LectureRepository
from edugate.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from edugate.application.ports.repositories.projection_repository import (
    ProjectionRepository,
)
from edugate.application.ports.repositories.role_repository import RoleRepository
from edugate.application.ports.repositories.topic_repository import TopicRepository
from edugate.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "LectureRepository",
    "PermissionRepository",
    "ProjectionRepository",
    "RoleRepository",
    "TopicRepository",
    "UserRepository",
]
