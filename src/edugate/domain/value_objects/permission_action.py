"""Permission actions for RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Verbs an authorization check is made for."""

    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ASSIGN = "ASSIGN"
    SEND = "SEND"
    SUBSCRIBE = "SUBSCRIBE"
