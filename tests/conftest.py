"""Pytest fixtures for sharegrant tests."""

from __future__ import annotations

import itertools
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from sharegrant.domain.access_policy import can_manage_sharing
from sharegrant.domain.entities import Grant, Resource, ResourceAccess, User
from sharegrant.domain.exceptions import GrantConflict, GrantNotFound
from sharegrant.domain.value_objects import Permission, ResourceKind


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    def add_user(self, user_id: str, username: str | None = None) -> User:
        user = User(id=user_id, username=username or user_id)
        self._by_id[user_id] = user
        return user

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)


class FakeResourceAdapter:
    """In-memory resource adapter for one kind. Enforces grant uniqueness."""

    _clock = itertools.count()

    def __init__(self, kind: ResourceKind, users: FakeUserRepository) -> None:
        self._kind = kind
        self._users = users
        self._resources: dict[UUID, Resource] = {}
        self._grants: dict[UUID, Grant] = {}

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def add_resource(self, owner_id: str, name: str = "resource") -> Resource:
        resource = Resource(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            created_at=datetime.now(UTC),
        )
        self._resources[resource.id] = resource
        return resource

    def grants_for(self, resource_id: UUID) -> list[Grant]:
        return [g for g in self._grants.values() if g.resource_id == resource_id]

    def _permission_of(self, resource_id: UUID, user_id: str | None) -> Permission | None:
        for g in self._grants.values():
            if g.resource_id == resource_id and g.grantee_user_id == user_id:
                return g.permission
        return None

    def _with_username(self, grant: Grant) -> Grant:
        user = self._users._by_id.get(grant.grantee_user_id) if grant.grantee_user_id else None
        grant.grantee_username = user.username if user else None
        return grant

    async def find_manageable_resource(
        self, resource_id: UUID, caller_id: str
    ) -> Resource | None:
        resource = self._resources.get(resource_id)
        if not resource:
            return None
        if can_manage_sharing(
            resource.is_owned_by(caller_id),
            self._permission_of(resource_id, caller_id),
        ):
            return resource
        return None

    async def list_accessible_resources(
        self, caller_id: str, limit: int = 10, offset: int = 0
    ) -> tuple[list[ResourceAccess], int]:
        rows = []
        for resource in sorted(self._resources.values(), key=lambda r: (r.name, str(r.id))):
            personal = self._permission_of(resource.id, caller_id)
            wildcard = self._permission_of(resource.id, None)
            if resource.is_owned_by(caller_id) or personal or wildcard:
                rows.append(
                    ResourceAccess(
                        resource=resource,
                        personal_permission=personal,
                        wildcard_permission=wildcard,
                    )
                )
        return rows[offset : offset + limit], len(rows)

    async def list_grants(self, resource_id: UUID) -> list[Grant]:
        grants = sorted(
            self.grants_for(resource_id), key=lambda g: g.created_at, reverse=True
        )
        return [self._with_username(g) for g in grants]

    async def find_grant(
        self, resource_id: UUID, grantee_user_id: str | None
    ) -> Grant | None:
        for g in self._grants.values():
            if g.resource_id == resource_id and g.grantee_user_id == grantee_user_id:
                return self._with_username(g)
        return None

    async def get_grant(self, grant_id: UUID) -> Grant | None:
        grant = self._grants.get(grant_id)
        return self._with_username(grant) if grant else None

    async def create_grant(
        self, resource_id: UUID, grantee_user_id: str | None, permission: Permission
    ) -> Grant:
        if any(
            g.resource_id == resource_id and g.grantee_user_id == grantee_user_id
            for g in self._grants.values()
        ):
            raise GrantConflict(f"{resource_id}/{grantee_user_id}")
        # Strictly increasing timestamps keep newest-first ordering stable
        created_at = datetime(2026, 1, 1, tzinfo=UTC) + timedelta(seconds=next(self._clock))
        grant = Grant(
            id=uuid4(),
            resource_id=resource_id,
            grantee_user_id=grantee_user_id,
            permission=permission,
            created_at=created_at,
        )
        self._grants[grant.id] = grant
        return self._with_username(grant)

    async def update_grant(self, grant_id: UUID, permission: Permission) -> Grant:
        grant = self._grants.get(grant_id)
        if not grant:
            raise GrantNotFound(str(grant_id))
        grant.permission = permission
        return self._with_username(grant)

    async def delete_grant(self, grant_id: UUID) -> None:
        self._grants.pop(grant_id, None)


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self._adapters = {kind: FakeResourceAdapter(kind, self.users) for kind in ResourceKind}

    def resources(self, kind: ResourceKind) -> FakeResourceAdapter:
        return self._adapters[kind]

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """UnitOfWork with users owner-1, user-2 and user-3."""
    uow = FakeUnitOfWork()
    uow.users.add_user("owner-1", "alice")
    uow.users.add_user("user-2", "bob")
    uow.users.add_user("user-3", "carol")
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the shared fake_uow."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_logger():
    """MagicMock standing in for a structlog bound logger."""
    from unittest.mock import MagicMock

    return MagicMock()
