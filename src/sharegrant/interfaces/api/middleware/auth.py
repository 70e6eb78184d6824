"""Auth middleware - reads the caller identity set by the upstream auth proxy."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Middleware that sets req.context.user from the trusted identity header."""

    def __init__(self, user_header: str = "X-User-Id") -> None:
        self._user_header = user_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Caller is None when the header is missing or blank."""
        user_id = (req.get_header(self._user_header) or "").strip()
        req.context.user = RequestUser(user_id=user_id) if user_id else None
