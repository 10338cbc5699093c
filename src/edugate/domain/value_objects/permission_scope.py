"""Permission scopes and their dominance order."""

from enum import StrEnum


class PermissionScope(StrEnum):
    """Breadth of access a permission grants.

    Dominance, most to least permissive: ANY > RESTRICTED > OWN.
    """

    OWN = "OWN"
    RESTRICTED = "RESTRICTED"
    ANY = "ANY"

    @property
    def rank(self) -> int:
        return _RANK[self]

    def dominates(self, required: "PermissionScope") -> bool:
        """True if this scope is equal to or more permissive than `required`."""
        return self.rank >= required.rank


_RANK = {
    PermissionScope.OWN: 0,
    PermissionScope.RESTRICTED: 1,
    PermissionScope.ANY: 2,
}


def most_permissive(scopes) -> PermissionScope | None:
    """Best scope among `scopes`, ANY short-circuiting; None if empty."""
    best: PermissionScope | None = None
    for scope in scopes:
        if scope is PermissionScope.ANY:
            return scope
        if best is None or scope.rank > best.rank:
            best = scope
    return best
