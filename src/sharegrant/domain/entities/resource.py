"""Shareable resource entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sharegrant.domain.value_objects import Permission


@dataclass
class Resource:
    """Resource owned by exactly one user. Owner holds implicit FULL."""

    id: UUID
    owner_id: str
    name: str
    created_at: datetime

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id


@dataclass
class ResourceAccess:
    """Resource visible to a caller with the caller's matching grants."""

    resource: Resource
    personal_permission: Permission | None = None
    wildcard_permission: Permission | None = None
