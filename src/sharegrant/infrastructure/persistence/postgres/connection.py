"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from sharegrant.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create async connection pool sized from settings.

    Pool is created closed; PoolLifespanMiddleware opens it on ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        kwargs={"application_name": "sharegrant"},
        open=False,
    )
