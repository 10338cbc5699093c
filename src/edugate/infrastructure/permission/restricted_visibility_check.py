"""Visibility check for individually non-public resources."""

import logging

from edugate.application.ports import ResourceLookup
from edugate.domain.entities import Caller
from edugate.domain.exceptions import RestrictedResource
from edugate.domain.value_objects import ResourceDesignation, ScopeGrant

logger = logging.getLogger(__name__)


class RestrictedVisibilityCheck:
    """Reject callers without restricted access from a single non-public resource.

    Collections always pass: which items of a collection are visible is left
    to the query layer, driven by `ScopeGrant.can_access_restricted`.
    """

    async def check(
        self,
        caller: Caller,
        grant: ScopeGrant,
        lookup: ResourceLookup,
        designation: ResourceDesignation,
    ) -> None:
        if grant.can_access_restricted or not designation.is_single:
            return

        if designation.id is not None:
            projection = await lookup.find_one_by_id(designation.id)
        else:
            projection = await lookup.find_one_by_name(designation.name)

        # Missing, or without an explicit public=false, is not restricted.
        if projection is None or not projection.is_restricted:
            return

        logger.info("Denied user %s on restricted %s", caller.id, designation)
        raise RestrictedResource(
            "You don't have enough permissions to access this restricted resource!"
        )
