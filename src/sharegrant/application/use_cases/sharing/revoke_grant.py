"""Revoke grant use case."""

from uuid import UUID

import structlog

from sharegrant.domain.exceptions import GrantNotFound, ResourceNotFound
from sharegrant.domain.value_objects import ResourceKind


class RevokeGrantUseCase:
    """Remove a grant from a resource. Caller must be owner or hold FULL."""

    def __init__(
        self,
        resource_kind: ResourceKind,
        unit_of_work_factory: type,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._kind = resource_kind
        self._uow_factory = unit_of_work_factory
        self._logger = logger or structlog.get_logger()

    async def execute(self, resource_id: UUID, caller_id: str, grant_id: UUID) -> None:
        """Delete grant_id. Raises GrantNotFound if it is absent or belongs elsewhere."""
        async with self._uow_factory() as uow:
            adapter = uow.resources(self._kind)
            resource = await adapter.find_manageable_resource(resource_id, caller_id)
            if not resource:
                raise ResourceNotFound(self._kind)

            grant = await adapter.get_grant(grant_id)
            if not grant or grant.resource_id != resource_id:
                raise GrantNotFound(str(grant_id))
            await adapter.delete_grant(grant_id)

        self._logger.info(
            "grant_revoked",
            resource_kind=self._kind.value,
            resource_id=str(resource_id),
            grant_id=str(grant_id),
        )
