"""Domain exceptions."""


class EduGateError(Exception):
    """Base exception for EduGate."""

    pass


class Unauthenticated(EduGateError):
    """Missing, invalid or expired session token."""

    pass


class PermissionDenied(EduGateError):
    """User does not have permission for the requested action."""

    pass


class NoPermission(PermissionDenied):
    """Role holds no permission at all for the action on the resource type."""

    pass


class InsufficientScope(PermissionDenied):
    """Role holds a permission, but its scope is narrower than required."""

    pass


class NotResourceOwner(PermissionDenied):
    """Resource was created by someone else."""

    pass


class RestrictedResource(PermissionDenied):
    """Resource is not public and the role cannot see restricted resources."""

    pass


class NotFound(EduGateError):
    """Requested resource was not found."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class Conflict(EduGateError):
    """Write would violate a uniqueness constraint."""

    pass


class ValidationError(EduGateError):
    """Validation failed for input data."""

    pass


class AmbiguousResourceDesignation(ValidationError):
    """Neither a resource id nor a resource name could be extracted."""

    pass


class ConfigurationError(EduGateError):
    """Resource type wired into a guard without the required lookup contract."""

    pass
