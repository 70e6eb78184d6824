"""Share resource use case - create or update a grant."""

from uuid import UUID

import structlog

from sharegrant.application.dto.grant_dto import GrantView, ShareOutcome
from sharegrant.domain.exceptions import (
    GranteeNotFound,
    GrantConflict,
    ResourceNotFound,
    SelfShareForbidden,
)
from sharegrant.domain.value_objects import Permission, ResourceKind


class ShareResourceUseCase:
    """Grant permission on a resource to a user or, with grantee None, to everyone.

    Repeated calls for the same grantee update the existing grant in place.
    """

    def __init__(
        self,
        resource_kind: ResourceKind,
        unit_of_work_factory: type,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._kind = resource_kind
        self._uow_factory = unit_of_work_factory
        self._logger = logger or structlog.get_logger()

    async def execute(
        self,
        resource_id: UUID,
        caller_id: str,
        grantee_user_id: str | None,
        permission: Permission,
    ) -> ShareOutcome:
        """Create the grant, or update it if the grantee already has one."""
        async with self._uow_factory() as uow:
            adapter = uow.resources(self._kind)
            resource = await adapter.find_manageable_resource(resource_id, caller_id)
            if not resource:
                raise ResourceNotFound(self._kind)

            if grantee_user_id is not None:
                grantee = await uow.users.get_by_id(grantee_user_id)
                if not grantee:
                    raise GranteeNotFound(grantee_user_id)
                if grantee_user_id == caller_id:
                    raise SelfShareForbidden(caller_id)

            existing = await adapter.find_grant(resource_id, grantee_user_id)
            if existing:
                grant = await adapter.update_grant(existing.id, permission)
                self._log("grant_updated", resource_id, grant.id, permission)
                return ShareOutcome(grant=GrantView.from_grant(grant), created=False)

            try:
                grant = await adapter.create_grant(resource_id, grantee_user_id, permission)
            except GrantConflict:
                # Concurrent share created the grant between lookup and insert.
                existing = await adapter.find_grant(resource_id, grantee_user_id)
                if not existing:
                    raise
                grant = await adapter.update_grant(existing.id, permission)
                self._log("grant_create_conflict_retried", resource_id, grant.id, permission)
                return ShareOutcome(grant=GrantView.from_grant(grant), created=False)

            self._log("grant_created", resource_id, grant.id, permission)
            return ShareOutcome(grant=GrantView.from_grant(grant), created=True)

    def _log(self, event: str, resource_id: UUID, grant_id: UUID, permission: Permission) -> None:
        self._logger.info(
            event,
            resource_kind=self._kind.value,
            resource_id=str(resource_id),
            grant_id=str(grant_id),
            permission=permission.value,
        )
