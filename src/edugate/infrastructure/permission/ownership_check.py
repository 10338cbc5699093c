"""Creator-of-record check for a single resource instance."""

import logging

from edugate.application.ports import ResourceLookup
from edugate.domain.entities import Caller
from edugate.domain.exceptions import AmbiguousResourceDesignation, NotResourceOwner
from edugate.domain.value_objects import ResourceDesignation, ScopeGrant

logger = logging.getLogger(__name__)


class ResourceOwnershipCheck:
    """Allow OWN-scoped callers to act only on resources they created."""

    async def check(
        self,
        caller: Caller,
        grant: ScopeGrant,
        lookup: ResourceLookup,
        designation: ResourceDesignation,
    ) -> None:
        if not grant.requires_ownership:
            return

        if designation.id is not None:
            creator_id = await lookup.find_creator_id_by_id(designation.id)
        elif designation.name is not None:
            creator_id = await lookup.find_creator_id_by_name(designation.name)
        else:
            raise AmbiguousResourceDesignation(
                "Invalid resource ID and name for permissions check."
            )

        # Resources created before ownership was recorded belong to everyone.
        if not creator_id:
            return
        if creator_id == caller.id:
            return

        logger.info(
            "Denied user %s on %s: created by user %s",
            caller.id, designation, creator_id,
        )
        raise NotResourceOwner(
            "You can't modify or delete a resource created by someone else!"
        )
