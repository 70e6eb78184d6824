"""PostgreSQL resource adapter - resource lookup and grant storage for one kind.

Concrete adapters only supply a ResourceTableBinding; every query is shared.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from psycopg import AsyncConnection, sql
from psycopg.errors import UniqueViolation

from sharegrant.domain.entities import Grant, Resource, ResourceAccess
from sharegrant.domain.exceptions import GrantConflict, GrantNotFound
from sharegrant.domain.value_objects import Permission, ResourceKind


@dataclass(frozen=True)
class ResourceTableBinding:
    """Where one resource kind and its grants live."""

    kind: ResourceKind
    resource_table: str
    grant_table: str
    resource_column: str
    user_table: str = "app_user"

    def params(self) -> dict[str, sql.Identifier]:
        return {
            "resource": sql.Identifier(self.resource_table),
            "grant": sql.Identifier(self.grant_table),
            "fk": sql.Identifier(self.resource_column),
            "users": sql.Identifier(self.user_table),
        }


_GRANT_COLUMNS = (
    "g.id, g.{fk}, g.user_id, g.permission, g.created_at, "
    "(SELECT u.username FROM {users} u WHERE u.id = g.user_id)"
)

# Params: (caller_id, caller_id)
_ACCESSIBLE_FROM = (
    "FROM {resource} r "
    "LEFT JOIN {grant} p ON p.{fk} = r.id AND p.user_id = %s "
    "LEFT JOIN {grant} w ON w.{fk} = r.id AND w.user_id IS NULL "
    "WHERE r.owner_id = %s OR p.id IS NOT NULL OR w.id IS NOT NULL"
)


def _grant_from_row(r: tuple) -> Grant:
    return Grant(
        id=r[0],
        resource_id=r[1],
        grantee_user_id=r[2],
        permission=Permission(r[3]),
        created_at=r[4],
        grantee_username=r[5],
    )


def _resource_from_row(r: tuple) -> Resource:
    return Resource(id=r[0], owner_id=r[1], name=r[2], created_at=r[3])


def _optional_permission(value: str | None) -> Permission | None:
    return Permission(value) if value is not None else None


class PostgresResourceAdapter:
    """Resource adapter implementation, parameterized by a table binding."""

    binding: ResourceTableBinding

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @property
    def kind(self) -> ResourceKind:
        return self.binding.kind

    def _sql(self, query: str) -> sql.Composed:
        return sql.SQL(query).format(**self.binding.params())

    async def find_manageable_resource(
        self, resource_id: UUID, caller_id: str
    ) -> Resource | None:
        """Get resource if caller is owner or holds a personal FULL grant.

        A wildcard FULL grant does not confer sharing management.
        """
        cur = await self._conn.execute(
            self._sql(
                "SELECT r.id, r.owner_id, r.name, r.created_at FROM {resource} r "
                "WHERE r.id = %s AND (r.owner_id = %s OR EXISTS ("
                "SELECT 1 FROM {grant} g WHERE g.{fk} = r.id AND g.user_id = %s "
                "AND g.permission = 'FULL'))"
            ),
            (resource_id, caller_id, caller_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _resource_from_row(r)

    async def list_accessible_resources(
        self, caller_id: str, limit: int = 10, offset: int = 0
    ) -> tuple[list[ResourceAccess], int]:
        """List resources caller owns or holds a personal or wildcard grant on.

        Returns one page ordered by name, and the total number of such resources.
        """
        cur = await self._conn.execute(
            self._sql(f"SELECT COUNT(*) {_ACCESSIBLE_FROM}"), (caller_id, caller_id)
        )
        total = (await cur.fetchone())[0]

        cur = await self._conn.execute(
            self._sql(
                "SELECT r.id, r.owner_id, r.name, r.created_at, p.permission, w.permission "
                f"{_ACCESSIBLE_FROM} ORDER BY r.name, r.id LIMIT %s OFFSET %s"
            ),
            (caller_id, caller_id, limit, offset),
        )
        rows = await cur.fetchall()
        return [
            ResourceAccess(
                resource=_resource_from_row(r),
                personal_permission=_optional_permission(r[4]),
                wildcard_permission=_optional_permission(r[5]),
            )
            for r in rows
        ]

    async def list_grants(self, resource_id: UUID) -> list[Grant]:
        """List grants for resource, newest first."""
        cur = await self._conn.execute(
            self._sql(
                f"SELECT {_GRANT_COLUMNS} FROM {{grant}} g "
                "WHERE g.{fk} = %s ORDER BY g.created_at DESC"
            ),
            (resource_id,),
        )
        rows = await cur.fetchall()
        return [_grant_from_row(r) for r in rows]

    async def find_grant(
        self, resource_id: UUID, grantee_user_id: str | None
    ) -> Grant | None:
        """Get grant for exact grantee; None selects the wildcard grant."""
        if grantee_user_id is None:
            cur = await self._conn.execute(
                self._sql(
                    f"SELECT {_GRANT_COLUMNS} FROM {{grant}} g "
                    "WHERE g.{fk} = %s AND g.user_id IS NULL"
                ),
                (resource_id,),
            )
        else:
            cur = await self._conn.execute(
                self._sql(
                    f"SELECT {_GRANT_COLUMNS} FROM {{grant}} g "
                    "WHERE g.{fk} = %s AND g.user_id = %s"
                ),
                (resource_id, grantee_user_id),
            )
        r = await cur.fetchone()
        if not r:
            return None
        return _grant_from_row(r)

    async def get_grant(self, grant_id: UUID) -> Grant | None:
        """Get grant by id."""
        cur = await self._conn.execute(
            self._sql(f"SELECT {_GRANT_COLUMNS} FROM {{grant}} g WHERE g.id = %s"),
            (grant_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _grant_from_row(r)

    async def create_grant(
        self, resource_id: UUID, grantee_user_id: str | None, permission: Permission
    ) -> Grant:
        """Create grant. Unique index violation becomes GrantConflict."""
        try:
            # Savepoint keeps the outer transaction usable after a conflict.
            async with self._conn.transaction():
                cur = await self._conn.execute(
                    self._sql(
                        "INSERT INTO {grant} AS g (id, {fk}, user_id, permission, created_at) "
                        f"VALUES (%s, %s, %s, %s, %s) RETURNING {_GRANT_COLUMNS}"
                    ),
                    (
                        uuid4(),
                        resource_id,
                        grantee_user_id,
                        permission.value,
                        datetime.now(UTC),
                    ),
                )
                r = await cur.fetchone()
        except UniqueViolation as e:
            raise GrantConflict(f"{resource_id}/{grantee_user_id}") from e
        return _grant_from_row(r)

    async def update_grant(self, grant_id: UUID, permission: Permission) -> Grant:
        """Update grant permission."""
        cur = await self._conn.execute(
            self._sql(
                "UPDATE {grant} AS g SET permission = %s WHERE g.id = %s "
                f"RETURNING {_GRANT_COLUMNS}"
            ),
            (permission.value, grant_id),
        )
        r = await cur.fetchone()
        if not r:
            raise GrantNotFound(str(grant_id))
        return _grant_from_row(r)

    async def delete_grant(self, grant_id: UUID) -> None:
        """Delete grant."""
        await self._conn.execute(
            self._sql("DELETE FROM {grant} WHERE id = %s"),
            (grant_id,),
        )


class AiAccountAdapter(PostgresResourceAdapter):
    """AI credential accounts."""

    binding = ResourceTableBinding(
        kind=ResourceKind.AI_ACCOUNT,
        resource_table="ai_account",
        grant_table="user_ai_account_access",
        resource_column="ai_account_id",
    )


class AiModelAdapter(PostgresResourceAdapter):
    """AI models."""

    binding = ResourceTableBinding(
        kind=ResourceKind.AI_MODEL,
        resource_table="ai_model",
        grant_table="user_ai_model_access",
        resource_column="ai_model_id",
    )


class AiBotAdapter(PostgresResourceAdapter):
    """AI bots."""

    binding = ResourceTableBinding(
        kind=ResourceKind.AI_BOT,
        resource_table="ai_bot",
        grant_table="user_ai_bot_access",
        resource_column="ai_bot_id",
    )


class PaperlessInstanceAdapter(PostgresResourceAdapter):
    """Paperless document-source instances."""

    binding = ResourceTableBinding(
        kind=ResourceKind.PAPERLESS_INSTANCE,
        resource_table="paperless_instance",
        grant_table="user_paperless_instance_access",
        resource_column="instance_id",
    )


ADAPTERS: dict[ResourceKind, type[PostgresResourceAdapter]] = {
    adapter.binding.kind: adapter
    for adapter in (
        AiAccountAdapter,
        AiModelAdapter,
        AiBotAdapter,
        PaperlessInstanceAdapter,
    )
}
