"""Resource adapter port - one binding per resource kind."""

from typing import Protocol
from uuid import UUID

from sharegrant.domain.entities import Grant, Resource, ResourceAccess
from sharegrant.domain.value_objects import Permission, ResourceKind


class ResourceAdapter(Protocol):
    """Port for resource lookup and grant persistence of one resource kind.

    Storage details (tables, columns) stay behind this interface.
    """

    @property
    def kind(self) -> ResourceKind: ...

    async def find_manageable_resource(
        self, resource_id: UUID, caller_id: str
    ) -> Resource | None:
        """Resource if caller is owner or holds a personal FULL grant, else None."""
        ...

    async def list_accessible_resources(
        self, caller_id: str, limit: int = 10, offset: int = 0
    ) -> tuple[list[ResourceAccess], int]:
        """One page of visible resources by name, and the total count."""
        ...

    async def list_grants(self, resource_id: UUID) -> list[Grant]:
        """Grants for resource, most recent first, with grantee usernames."""
        ...

    async def find_grant(
        self, resource_id: UUID, grantee_user_id: str | None
    ) -> Grant | None:
        """Exact match; None matches only the wildcard grant."""
        ...

    async def get_grant(self, grant_id: UUID) -> Grant | None: ...

    async def create_grant(
        self, resource_id: UUID, grantee_user_id: str | None, permission: Permission
    ) -> Grant:
        """Create grant. Raises GrantConflict if the pair is already granted."""
        ...

    async def update_grant(self, grant_id: UUID, permission: Permission) -> Grant:
        """Change permission. Raises GrantNotFound if grant_id does not exist."""
        ...

    async def delete_grant(self, grant_id: UUID) -> None: ...
