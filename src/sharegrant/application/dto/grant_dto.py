"""Grant DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sharegrant.domain.entities import Grant
from sharegrant.domain.value_objects import Permission


@dataclass
class GrantView:
    """Grant as returned to callers."""

    id: UUID
    user_id: str | None
    username: str | None
    permission: Permission
    created_at: datetime

    @classmethod
    def from_grant(cls, grant: Grant) -> "GrantView":
        return cls(
            id=grant.id,
            user_id=grant.grantee_user_id,
            username=grant.grantee_username if grant.grantee_user_id else None,
            permission=grant.permission,
            created_at=grant.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "userId": self.user_id,
            "username": self.username,
            "permission": self.permission.value,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class ShareOutcome:
    """Result of create-or-update: the grant and whether it was newly created."""

    grant: GrantView
    created: bool
