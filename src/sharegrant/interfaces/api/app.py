"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from sharegrant.application.use_cases.resource.list_accessible_resources import (
    ListAccessibleResourcesUseCase,
)
from sharegrant.application.use_cases.sharing.list_grants import ListGrantsUseCase
from sharegrant.application.use_cases.sharing.revoke_grant import RevokeGrantUseCase
from sharegrant.application.use_cases.sharing.share_resource import ShareResourceUseCase
from sharegrant.domain.value_objects import ResourceKind
from sharegrant.interfaces.api.errors import handle_unexpected_error
from sharegrant.interfaces.api.resources.health import HealthResource
from sharegrant.interfaces.api.resources.resources import AccessibleResourcesResource
from sharegrant.interfaces.api.resources.sharing import ShareResource, SharesResource


def add_sharing_routes(app: App, kind: ResourceKind, unit_of_work_factory: type) -> None:
    """Mount listing and sharing routes for one resource kind."""
    base = f"/v1/{kind.route_segment}"
    app.add_route(
        base,
        AccessibleResourcesResource(
            kind, ListAccessibleResourcesUseCase(kind, unit_of_work_factory)
        ),
    )
    app.add_route(
        base + "/{resource_id}/sharing",
        SharesResource(
            kind,
            ListGrantsUseCase(kind, unit_of_work_factory),
            ShareResourceUseCase(kind, unit_of_work_factory),
        ),
    )
    app.add_route(
        base + "/{resource_id}/sharing/{access_id}",
        ShareResource(kind, RevokeGrantUseCase(kind, unit_of_work_factory)),
    )


def create_app(
    unit_of_work_factory: type,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes for every resource kind."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    for kind in ResourceKind:
        add_sharing_routes(app, kind, unit_of_work_factory)
    return app
