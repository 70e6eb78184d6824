"""Application entry point and composition root."""

from sharegrant import __version__
from sharegrant.config import get_settings
from sharegrant.infrastructure.logging import configure_logging
from sharegrant.infrastructure.persistence.postgres.connection import create_pool
from sharegrant.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from sharegrant.interfaces.api.app import create_app
from sharegrant.interfaces.api.middleware.auth import AuthMiddleware
from sharegrant.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from sharegrant.interfaces.api.resources.health import HealthResource


def create_sharegrant_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    return create_app(
        unit_of_work_factory=uow_factory,
        health_resource=HealthResource(pool),
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(settings.trusted_user_header),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    print(f"sharegrant v{__version__}")
    uvicorn.run(
        "sharegrant.main:create_sharegrant_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )
