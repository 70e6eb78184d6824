"""Error responses and the app-level handler for unexpected exceptions."""

import falcon
import falcon.asgi
import structlog

logger = structlog.get_logger()


def error_body(code: str) -> dict:
    """Error payload - error and message carry the same code."""
    return {"error": code, "message": code}


def set_error(resp: falcon.asgi.Response, status: str, code: str) -> None:
    resp.status = status
    resp.media = error_body(code)


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    """Log with resource-kind context and answer 500 without internal detail."""
    logger.error(
        "unhandled_request_error",
        resource_kind=getattr(req.context, "resource_kind", None),
        method=req.method,
        path=req.path,
        exc_info=ex,
    )
    set_error(resp, falcon.HTTP_500, "internalServerError")
