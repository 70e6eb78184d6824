"""Domain value objects."""

from sharegrant.domain.value_objects.permission import Permission
from sharegrant.domain.value_objects.resource_kind import ResourceKind

__all__ = [
    "Permission",
    "ResourceKind",
]
