"""Application ports - interfaces for external adapters."""

from edugate.application.ports.permission_cache import PermissionCacheRefresher
from edugate.application.ports.resource_lookup import ResourceLookup
from edugate.application.ports.token_provider import TokenClaims, TokenProvider
from edugate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionCacheRefresher",
    "ResourceLookup",
    "TokenClaims",
    "TokenProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
