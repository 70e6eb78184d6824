"""Pool lifespan middleware - ties the database pool to the ASGI lifespan."""

from typing import Any

import structlog
from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Opens the connection pool on startup and closes it on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._pool = pool
        self._logger = logger or structlog.get_logger()

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=True)
        self._logger.info(
            "database_pool_opened",
            min_size=self._pool.min_size,
            max_size=self._pool.max_size,
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        self._logger.info("database_pool_closed")
