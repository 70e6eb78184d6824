"""Resource listing DTOs."""

import math
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class AccessibleResource:
    """Resource visible to the caller with the caller's permission flags."""

    id: UUID
    name: str
    owner_id: str
    created_at: datetime
    can_edit: bool
    can_share: bool
    is_owner: bool

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "ownerId": self.owner_id,
            "createdAt": self.created_at.isoformat(),
            "canEdit": self.can_edit,
            "canShare": self.can_share,
            "isOwner": self.is_owner,
        }


@dataclass
class ResourcePage:
    """One page of a resource listing."""

    items: list[AccessibleResource]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }
