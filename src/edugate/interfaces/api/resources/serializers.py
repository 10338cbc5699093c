"""JSON shapes for API responses."""

from edugate.domain.entities import Lecture, Permission, Role, Topic, User


def role_media(role: Role) -> dict:
    return {
        "id": role.id,
        "name": role.name,
        "description": role.description,
        "creator_id": role.creator_id,
    }


def permission_media(permission: Permission) -> dict:
    return {
        "id": permission.id,
        "action": permission.action.value,
        "scope": permission.scope.value,
        "resource": permission.resource.value,
        "description": permission.description,
    }


def lecture_media(lecture: Lecture) -> dict:
    return {
        "id": lecture.id,
        "subject_id": lecture.subject_id,
        "title": lecture.title,
        "description": lecture.description,
        "creator_id": lecture.creator_id,
    }


def topic_media(topic: Topic) -> dict:
    return {
        "id": topic.id,
        "name": topic.name,
        "description": topic.description,
        "public": topic.public,
    }


def user_media(user: User) -> dict:
    return {
        "id": user.id,
        "role_id": user.role_id,
        "email": user.email,
        "given_name": user.given_name,
        "family_name": user.family_name,
    }
