"""Repository ports."""

from sharegrant.application.ports.repositories.resource_adapter import ResourceAdapter
from sharegrant.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "ResourceAdapter",
    "UserRepository",
]
