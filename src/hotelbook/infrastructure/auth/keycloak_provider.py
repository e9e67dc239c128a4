"""Keycloak OIDC provider for bearer token validation."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    realm_roles: list[str]


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts user info and realm roles."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive or rejected."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )
