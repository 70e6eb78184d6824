"""Sharing API resources."""

from uuid import UUID

import falcon
import falcon.asgi

from sharegrant.application.dto.share_request import ShareRequest
from sharegrant.application.use_cases.sharing.list_grants import ListGrantsUseCase
from sharegrant.application.use_cases.sharing.revoke_grant import RevokeGrantUseCase
from sharegrant.application.use_cases.sharing.share_resource import ShareResourceUseCase
from sharegrant.domain.exceptions import (
    GranteeNotFound,
    GrantNotFound,
    ResourceNotFound,
    SelfShareForbidden,
    ValidationError,
)
from sharegrant.domain.value_objects import ResourceKind
from sharegrant.interfaces.api.errors import set_error


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


def _authenticated(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    user = getattr(req.context, "user", None)
    if not user:
        set_error(resp, falcon.HTTP_401, "unauthorized")
    return user


class SharesResource:
    """GET/POST /v1/{kind}/{resource_id}/sharing - list and create-or-update grants."""

    def __init__(
        self,
        resource_kind: ResourceKind,
        list_grants: ListGrantsUseCase,
        share_resource: ShareResourceUseCase,
    ) -> None:
        self._kind = resource_kind
        self._list = list_grants
        self._share = share_resource

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """List grants on resource."""
        req.context.resource_kind = self._kind.value
        user = _authenticated(req, resp)
        if not user:
            return

        res_id = _parse_uuid(resource_id)
        if res_id is None:
            set_error(resp, falcon.HTTP_404, self._kind.not_found_code)
            return

        try:
            grants = await self._list.execute(res_id, user.user_id)
        except ResourceNotFound as e:
            set_error(resp, falcon.HTTP_404, e.code)
            return

        resp.media = {"items": [g.to_dict() for g in grants]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Share resource with a user, or with everyone when userId is null."""
        req.context.resource_kind = self._kind.value
        user = _authenticated(req, resp)
        if not user:
            return

        res_id = _parse_uuid(resource_id)
        if res_id is None:
            set_error(resp, falcon.HTTP_404, self._kind.not_found_code)
            return

        try:
            body = await req.get_media()
            share = ShareRequest.from_dict(body)
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError, ValidationError):
            set_error(resp, falcon.HTTP_400, ValidationError.code)
            return

        try:
            outcome = await self._share.execute(
                res_id, user.user_id, share.user_id, share.permission
            )
        except (ResourceNotFound, GranteeNotFound) as e:
            set_error(resp, falcon.HTTP_404, e.code)
            return
        except SelfShareForbidden as e:
            set_error(resp, falcon.HTTP_400, e.code)
            return

        resp.media = outcome.grant.to_dict()
        resp.status = falcon.HTTP_201 if outcome.created else falcon.HTTP_200


class ShareResource:
    """DELETE /v1/{kind}/{resource_id}/sharing/{access_id} - revoke a grant."""

    def __init__(self, resource_kind: ResourceKind, revoke_grant: RevokeGrantUseCase) -> None:
        self._kind = resource_kind
        self._revoke = revoke_grant

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        access_id: str,
    ) -> None:
        """Revoke grant access_id on resource."""
        req.context.resource_kind = self._kind.value
        user = _authenticated(req, resp)
        if not user:
            return

        res_id = _parse_uuid(resource_id)
        if res_id is None:
            set_error(resp, falcon.HTTP_404, self._kind.not_found_code)
            return
        grant_id = _parse_uuid(access_id)
        if grant_id is None:
            set_error(resp, falcon.HTTP_404, GrantNotFound.code)
            return

        try:
            await self._revoke.execute(res_id, user.user_id, grant_id)
        except (ResourceNotFound, GrantNotFound) as e:
            set_error(resp, falcon.HTTP_404, e.code)
            return

        resp.status = falcon.HTTP_204
