"""Static permission catalog and default role definitions."""

from dataclasses import dataclass, field

from edugate.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
)

A = PermissionAction
S = PermissionScope
R = PermissionResource

Triple = tuple[PermissionAction, PermissionScope, PermissionResource]

# Actions that only exist for specific (scope, resource) pairs.
_SPECIAL_ACTIONS = frozenset({A.ASSIGN, A.SEND, A.SUBSCRIBE})

_SPECIAL_TRIPLES: tuple[Triple, ...] = (
    (A.ASSIGN, S.ANY, R.ROLE),
    (A.SEND, S.ANY, R.NOTIFICATION),
    (A.SUBSCRIBE, S.RESTRICTED, R.TOPIC),
    (A.SUBSCRIBE, S.ANY, R.TOPIC),
)


@dataclass(frozen=True)
class CatalogEntry:
    action: PermissionAction
    scope: PermissionScope
    resource: PermissionResource
    description: str

    @property
    def triple(self) -> Triple:
        return (self.action, self.scope, self.resource)


def describe(action: PermissionAction, scope: PermissionScope, resource: PermissionResource) -> str:
    """Human-readable description, e.g. 'UPDATE own lecture'."""
    if scope is S.RESTRICTED:
        breadth = "restricted"
    elif scope is S.OWN:
        breadth = "own"
    else:
        breadth = "any"
    return f"{action.value} {breadth} {resource.value.lower()}"


def build_permission_catalog() -> list[CatalogEntry]:
    """Every permission the platform knows about, in seeding order."""
    entries: list[CatalogEntry] = []
    for action in A:
        if action in _SPECIAL_ACTIONS:
            continue
        for scope in S:
            for resource in R:
                entries.append(
                    CatalogEntry(action, scope, resource, describe(action, scope, resource))
                )
    for action, scope, resource in _SPECIAL_TRIPLES:
        entries.append(CatalogEntry(action, scope, resource, describe(action, scope, resource)))
    return entries


@dataclass(frozen=True)
class DefaultRole:
    id: int
    name: str
    description: str
    permissions: tuple[Triple, ...] = field(default_factory=tuple)


_CONTENT = (R.MODULE, R.SUBJECT, R.LECTURE, R.LINK, R.QUIZ, R.QUESTION)

# Ordered by tier: a role also receives the permissions of every role after it
# (except the super-role, which needs none).
DEFAULT_ROLES: tuple[DefaultRole, ...] = (
    DefaultRole(0, "Founder", "Thank me later..."),
    DefaultRole(
        1,
        "SuperAdmin",
        "Administrator on steroids",
        tuple((A.UPDATE, S.ANY, r) for r in _CONTENT)
        + tuple((A.DELETE, S.ANY, r) for r in _CONTENT)
        + (
            (A.CREATE, S.ANY, R.TOPIC),
            (A.DELETE, S.OWN, R.TOPIC),
            (A.UPDATE, S.OWN, R.TOPIC),
        ),
    ),
    DefaultRole(
        2,
        "Admin",
        "Normal administrator",
        tuple((A.CREATE, S.ANY, r) for r in _CONTENT)
        + tuple((A.UPDATE, S.OWN, r) for r in _CONTENT)
        + tuple((A.DELETE, S.OWN, r) for r in _CONTENT)
        + (
            (A.SEND, S.ANY, R.NOTIFICATION),
            (A.READ, S.RESTRICTED, R.TOPIC),
            (A.SUBSCRIBE, S.RESTRICTED, R.TOPIC),
        ),
    ),
    DefaultRole(
        3,
        "User",
        "Default user role",
        (
            (A.READ, S.OWN, R.USER),
            (A.UPDATE, S.OWN, R.USER),
            (A.DELETE, S.OWN, R.USER),
            (A.READ, S.ANY, R.ROLE),
            (A.READ, S.ANY, R.PERMISSION),
        )
        + tuple(
            (A.READ, S.ANY, r)
            for r in (R.FACULTY, R.YEAR, *_CONTENT, R.NOTIFICATION, R.TOPIC)
        )
        + (
            (A.SUBSCRIBE, S.ANY, R.TOPIC),
            (A.CREATE, S.ANY, R.DEVICE),
            (A.READ, S.OWN, R.DEVICE),
            (A.DELETE, S.OWN, R.DEVICE),
        ),
    ),
)


def effective_default_permissions(role_id: int) -> list[Triple]:
    """Triples seeded for a default role, lower-tier permissions included."""
    if role_id == 0:
        return []
    triples: list[Triple] = []
    for role in DEFAULT_ROLES:
        if role.id >= role_id:
            triples.extend(t for t in role.permissions if t not in triples)
    return triples
