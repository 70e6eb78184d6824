"""List grants use case."""

from uuid import UUID

from sharegrant.application.dto.grant_dto import GrantView
from sharegrant.domain.exceptions import ResourceNotFound
from sharegrant.domain.value_objects import ResourceKind


class ListGrantsUseCase:
    """List grants on a resource. Caller must be owner or hold FULL."""

    def __init__(self, resource_kind: ResourceKind, unit_of_work_factory: type) -> None:
        self._kind = resource_kind
        self._uow_factory = unit_of_work_factory

    async def execute(self, resource_id: UUID, caller_id: str) -> list[GrantView]:
        """Return grants, most recent first."""
        async with self._uow_factory() as uow:
            adapter = uow.resources(self._kind)
            resource = await adapter.find_manageable_resource(resource_id, caller_id)
            if not resource:
                raise ResourceNotFound(self._kind)
            grants = await adapter.list_grants(resource_id)
        return [GrantView.from_grant(g) for g in grants]
