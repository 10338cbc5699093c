"""Domain entities."""

from edugate.domain.entities.lecture import Lecture
from edugate.domain.entities.permission import Permission
from edugate.domain.entities.resource_projection import ResourceProjection
from edugate.domain.entities.role import Role, RoleWithPermissions
from edugate.domain.entities.topic import Topic
from edugate.domain.entities.user import Caller, User

__all__ = [
    "Caller",
    "Lecture",
    "Permission",
    "ResourceProjection",
    "Role",
    "RoleWithPermissions",
    "Topic",
    "User",
]
