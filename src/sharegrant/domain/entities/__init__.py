"""Domain entities."""

from sharegrant.domain.entities.grant import Grant
from sharegrant.domain.entities.resource import Resource, ResourceAccess
from sharegrant.domain.entities.user import User

__all__ = [
    "Grant",
    "Resource",
    "ResourceAccess",
    "User",
]
