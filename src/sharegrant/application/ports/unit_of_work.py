"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from sharegrant.application.ports.repositories.resource_adapter import ResourceAdapter
from sharegrant.application.ports.repositories.user_repository import UserRepository
from sharegrant.domain.value_objects import ResourceKind


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    def resources(self, kind: ResourceKind) -> ResourceAdapter: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
