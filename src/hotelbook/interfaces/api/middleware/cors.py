"""CORS middleware for the admin frontend."""

import falcon
import falcon.asgi

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Authorization, Content-Type"


class CORSMiddleware:
    """Echo the request Origin when it is allowed and answer preflight requests.

    An origin list containing "*" allows any origin. Disallowed origins get no
    CORS headers, so the browser blocks the response.
    """

    def __init__(self, origins: list[str]) -> None:
        self._allow_any = "*" in origins
        self._origins = frozenset(origins)

    def _allowed_origin(self, req: falcon.asgi.Request) -> str | None:
        origin = req.get_header("Origin")
        if not origin:
            return None
        if self._allow_any or origin in self._origins:
            return origin
        return None

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Short-circuit preflight; OPTIONS never reaches the auth hooks."""
        if req.method != "OPTIONS" or not req.get_header("Access-Control-Request-Method"):
            return
        resp.status = falcon.HTTP_204
        if self._allowed_origin(req):
            resp.set_header("Access-Control-Allow-Methods", ALLOWED_METHODS)
            resp.set_header("Access-Control-Allow-Headers", ALLOWED_HEADERS)
            resp.set_header("Access-Control-Max-Age", "86400")
        resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        resp.append_header("Vary", "Origin")
        origin = self._allowed_origin(req)
        if origin:
            resp.set_header("Access-Control-Allow-Origin", origin)
