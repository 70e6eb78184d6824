"""List resources visible to a caller, with permission flags."""

from sharegrant.application.dto.resource_dto import AccessibleResource, ResourcePage
from sharegrant.domain.access_policy import derive_permissions, effective_permission
from sharegrant.domain.value_objects import ResourceKind


class ListAccessibleResourcesUseCase:
    """List owned and shared resources of one kind, one page at a time."""

    def __init__(self, resource_kind: ResourceKind, unit_of_work_factory: type) -> None:
        self._kind = resource_kind
        self._uow_factory = unit_of_work_factory

    async def execute(self, caller_id: str, page: int = 1, limit: int = 10) -> ResourcePage:
        async with self._uow_factory() as uow:
            rows, total = await uow.resources(self._kind).list_accessible_resources(
                caller_id, limit=limit, offset=(page - 1) * limit
            )

        items = []
        for row in rows:
            is_owner = row.resource.is_owned_by(caller_id)
            permission = effective_permission(
                is_owner, row.personal_permission, row.wildcard_permission
            )
            flags = derive_permissions(is_owner, permission)
            items.append(
                AccessibleResource(
                    id=row.resource.id,
                    name=row.resource.name,
                    owner_id=row.resource.owner_id,
                    created_at=row.resource.created_at,
                    can_edit=flags.can_edit,
                    can_share=flags.can_share,
                    is_owner=flags.is_owner,
                )
            )
        return ResourcePage(items=items, total=total, page=page, limit=limit)
