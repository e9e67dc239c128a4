"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from hotelbook import __version__
from hotelbook.config import get_settings
from hotelbook.infrastructure.auth.keycloak_provider import KeycloakProvider
from hotelbook.infrastructure.persistence.postgres.connection import create_pool
from hotelbook.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from hotelbook.interfaces.api.app import create_app
from hotelbook.interfaces.api.middleware.auth import AuthMiddleware
from hotelbook.interfaces.api.middleware.cors import CORSMiddleware
from hotelbook.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from hotelbook.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("hotelbook v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(
        "hotelbook.main:create_hotelbook_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )


def create_hotelbook_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; all requests are unauthenticated")

    return create_app(
        uow_factory,
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, admin_roles=settings.admin_role_set),
        ],
    )
