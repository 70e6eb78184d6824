"""Unit tests for PostgresResourceAdapter against a mocked async connection."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from psycopg.errors import UniqueViolation

from sharegrant.domain.exceptions import GrantConflict, GrantNotFound
from sharegrant.domain.value_objects import Permission
from sharegrant.infrastructure.persistence.postgres.resource_adapter import AiBotAdapter

NOW = datetime(2024, 5, 1, tzinfo=UTC)


def _conn(*, fetchone=None, fetchall=None, execute_error=None) -> MagicMock:
    cur = MagicMock()
    cur.fetchone = AsyncMock(return_value=fetchone)
    cur.fetchall = AsyncMock(return_value=fetchall or [])
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cur, side_effect=execute_error)
    tx = MagicMock()
    tx.__aenter__ = AsyncMock(return_value=None)
    tx.__aexit__ = AsyncMock(return_value=False)
    conn.transaction = MagicMock(return_value=tx)
    return conn


def _query(conn: MagicMock, call: int = -1) -> tuple[str, tuple]:
    """SQL text (as composed repr) and params of an execute call."""
    args = conn.execute.await_args_list[call].args
    return repr(args[0]), args[1]


def _grant_row(resource_id, user_id="user-2", permission="READ"):
    return (uuid4(), resource_id, user_id, permission, NOW, "bob" if user_id else None)


class TestFindGrant:
    @pytest.mark.asyncio
    async def test_wildcard_matches_null_user_only(self) -> None:
        rid = uuid4()
        conn = _conn(fetchone=_grant_row(rid, user_id=None, permission="WRITE"))

        grant = await AiBotAdapter(conn).find_grant(rid, None)

        text, params = _query(conn)
        assert "user_id IS NULL" in text
        assert "user_id = %s" not in text
        assert params == (rid,)
        assert grant.grantee_user_id is None
        assert grant.grantee_username is None
        assert grant.permission is Permission.WRITE

    @pytest.mark.asyncio
    async def test_personal_matches_exact_user(self) -> None:
        rid = uuid4()
        conn = _conn(fetchone=None)

        assert await AiBotAdapter(conn).find_grant(rid, "user-2") is None

        text, params = _query(conn)
        assert "user_id = %s" in text
        assert "IS NULL" not in text
        assert params == (rid, "user-2")


class TestCreateGrant:
    @pytest.mark.asyncio
    async def test_unique_violation_becomes_conflict(self) -> None:
        conn = _conn(execute_error=UniqueViolation())

        with pytest.raises(GrantConflict):
            await AiBotAdapter(conn).create_grant(uuid4(), "user-2", Permission.READ)

        conn.transaction.assert_called_once()
        conn.transaction.return_value.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_inserted_row_is_mapped(self) -> None:
        rid = uuid4()
        row = _grant_row(rid, permission="FULL")
        conn = _conn(fetchone=row)

        grant = await AiBotAdapter(conn).create_grant(rid, "user-2", Permission.FULL)

        text, params = _query(conn)
        assert "INSERT INTO" in text
        assert "Identifier('user_ai_bot_access')" in text
        assert params[1:4] == (rid, "user-2", "FULL")
        assert grant.id == row[0]
        assert grant.grantee_username == "bob"


class TestUpdateGrant:
    @pytest.mark.asyncio
    async def test_missing_row_becomes_grant_not_found(self) -> None:
        gid = uuid4()
        conn = _conn(fetchone=None)

        with pytest.raises(GrantNotFound):
            await AiBotAdapter(conn).update_grant(gid, Permission.WRITE)

        _, params = _query(conn)
        assert params == ("WRITE", gid)


class TestFindManageableResource:
    @pytest.mark.asyncio
    async def test_requires_owner_or_personal_full_grant(self) -> None:
        rid = uuid4()
        conn = _conn(fetchone=(rid, "owner-1", "Support bot", NOW))

        resource = await AiBotAdapter(conn).find_manageable_resource(rid, "user-3")

        text, params = _query(conn)
        assert "EXISTS" in text
        assert "g.user_id = %s" in text
        assert "'FULL'" in text
        assert "IS NULL" not in text
        assert params == (rid, "user-3", "user-3")
        assert resource.owner_id == "owner-1"

    @pytest.mark.asyncio
    async def test_no_row_is_none(self) -> None:
        conn = _conn(fetchone=None)
        assert await AiBotAdapter(conn).find_manageable_resource(uuid4(), "user-3") is None


class TestListAccessibleResources:
    @pytest.mark.asyncio
    async def test_counts_then_pages(self) -> None:
        rid = uuid4()
        conn = _conn(
            fetchone=(7,),
            fetchall=[(rid, "owner-1", "bot", NOW, None, "READ")],
        )

        rows, total = await AiBotAdapter(conn).list_accessible_resources(
            "user-2", limit=5, offset=5
        )

        assert total == 7
        count_text, count_params = _query(conn, 0)
        assert "COUNT(*)" in count_text
        assert count_params == ("user-2", "user-2")
        page_text, page_params = _query(conn, 1)
        assert "LIMIT %s OFFSET %s" in page_text
        assert page_params == ("user-2", "user-2", 5, 5)
        [row] = rows
        assert row.resource.id == rid
        assert row.personal_permission is None
        assert row.wildcard_permission is Permission.READ
