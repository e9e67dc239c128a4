"""Error handlers - map domain error kinds to HTTP responses."""

import logging

import falcon
import falcon.asgi

from hotelbook.domain.exceptions import HotelBookError, NotFound
from hotelbook.domain.value_objects import ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: falcon.HTTP_404,
    ErrorKind.CONFLICT: falcon.HTTP_400,
    ErrorKind.VALIDATION: falcon.HTTP_400,
    ErrorKind.PERMISSION_DENIED: falcon.HTTP_403,
}


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: HotelBookError, params
) -> None:
    """Translate a HotelBookError by its kind."""
    resp.status = STATUS_BY_KIND.get(ex.kind, falcon.HTTP_400)
    body = {"error": str(ex), "kind": ex.kind.value}
    if isinstance(ex, NotFound):
        body["entity"] = ex.entity
    resp.media = body


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    """Log and hide anything that is not a domain or HTTP error."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; Falcon resolves the most specific exception type first."""
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(HotelBookError, handle_domain_error)
