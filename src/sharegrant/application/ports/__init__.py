"""Application ports - interfaces for external adapters."""

from sharegrant.application.ports.repositories import ResourceAdapter, UserRepository
from sharegrant.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ResourceAdapter",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UserRepository",
]
