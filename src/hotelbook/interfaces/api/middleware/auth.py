"""Auth middleware and route guards."""

from dataclasses import dataclass, field

import falcon
import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None
    roles: list[str] = field(default_factory=list)
    is_admin: bool = False


class AuthMiddleware:
    """Middleware that validates bearer tokens and sets req.context.user.

    req.context.user is None when no valid token is presented.
    """

    def __init__(self, keycloak_provider=None, admin_roles: frozenset[str] = frozenset()) -> None:
        self._keycloak = keycloak_provider
        self._admin_roles = admin_roles

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        user = await self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = RequestUser(
                user_id=user.user_id,
                email=user.email,
                username=user.username,
                roles=list(user.realm_roles),
                is_admin=bool(self._admin_roles.intersection(user.realm_roles)),
            )


async def require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params) -> None:
    """Before-hook: reject requests without an authenticated user."""
    if not getattr(req.context, "user", None):
        raise falcon.HTTPUnauthorized(
            title="Unauthorized",
            description="Access token required",
        )


async def require_admin(req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params) -> None:
    """Before-hook: only users holding an admin role may proceed."""
    await require_user(req, resp, resource, params)
    if not req.context.user.is_admin:
        raise falcon.HTTPForbidden(
            title="Forbidden",
            description="Insufficient permissions",
        )
