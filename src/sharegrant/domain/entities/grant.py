"""Grant entity - permission on a resource for one user or for everyone."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sharegrant.domain.value_objects import Permission


@dataclass
class Grant:
    """Grant - grantee holds permission on resource.

    grantee_user_id None is the wildcard slot: every authenticated user.
    """

    id: UUID
    resource_id: UUID
    grantee_user_id: str | None
    permission: Permission
    created_at: datetime
    grantee_username: str | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.grantee_user_id is None
