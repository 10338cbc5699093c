"""Resource types that permissions are granted on."""

from enum import StrEnum


class PermissionResource(StrEnum):
    """Closed set of resource kinds."""

    USER = "USER"
    ROLE = "ROLE"
    PERMISSION = "PERMISSION"
    FACULTY = "FACULTY"
    YEAR = "YEAR"
    MODULE = "MODULE"
    SUBJECT = "SUBJECT"
    LECTURE = "LECTURE"
    LINK = "LINK"
    QUIZ = "QUIZ"
    QUESTION = "QUESTION"
    QUIZ_ATTEMPT = "QUIZ_ATTEMPT"
    QUESTION_ATTEMPT = "QUESTION_ATTEMPT"
    DEVICE = "DEVICE"
    NOTIFICATION = "NOTIFICATION"
    TOPIC = "TOPIC"
    MARKED_QUESTION = "MARKED_QUESTION"
