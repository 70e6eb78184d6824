"""Fixtures for API tests."""

import pytest

from sharegrant.interfaces.api.app import create_app
from sharegrant.interfaces.api.middleware.auth import AuthMiddleware
from sharegrant.interfaces.api.resources.health import HealthResource


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app over the in-memory unit of work."""
    return create_app(
        unit_of_work_factory=uow_factory,
        health_resource=HealthResource(),
        middleware=[AuthMiddleware("X-User-Id")],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


def as_user(user_id: str) -> dict[str, str]:
    """Headers authenticating the request as user_id."""
    return {"X-User-Id": user_id}
