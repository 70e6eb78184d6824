"""Resource listing API resource."""

import falcon
import falcon.asgi

from sharegrant.application.use_cases.resource.list_accessible_resources import (
    ListAccessibleResourcesUseCase,
)
from sharegrant.domain.value_objects import ResourceKind
from sharegrant.interfaces.api.errors import set_error


class AccessibleResourcesResource:
    """GET /v1/{kind} - resources the caller owns or has been granted."""

    def __init__(
        self,
        resource_kind: ResourceKind,
        list_resources: ListAccessibleResourcesUseCase,
    ) -> None:
        self._kind = resource_kind
        self._list = list_resources

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        req.context.resource_kind = self._kind.value
        user = getattr(req.context, "user", None)
        if not user:
            set_error(resp, falcon.HTTP_401, "unauthorized")
            return

        page = max(_int_param(req, "page") or 1, 1)
        limit = _int_param(req, "limit") or 10
        limit = min(max(limit, 1), 100)

        result = await self._list.execute(user.user_id, page=page, limit=limit)
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200


def _int_param(req: falcon.asgi.Request, name: str) -> int | None:
    """Integer query param; a non-numeric value counts as absent."""
    try:
        return req.get_param_as_int(name)
    except falcon.HTTPInvalidParam:
        return None
