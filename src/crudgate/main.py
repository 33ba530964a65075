"""Application entry point and composition root."""

from falcon.asgi import App

from crudgate import __version__
from crudgate.config import CrudConfig, Settings, configure_logging, get_settings
from crudgate.infrastructure.auth.keycloak_provider import (
    KeycloakAuthHandler,
    KeycloakProvider,
)
from crudgate.interfaces.api.app import create_app
from crudgate.interfaces.api.handlers import default_not_allowed_handler


def main() -> None:
    """CLI entry point."""
    print(f"crudgate v{__version__}")


def create_keycloak_auth_handler(settings: Settings) -> KeycloakAuthHandler | None:
    """Auth handler for the configured realm, or None without a client secret."""
    if not settings.keycloak_client_secret:
        return None
    provider = KeycloakProvider(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        client_secret=settings.keycloak_client_secret,
    )
    return KeycloakAuthHandler(provider)


def create_crudgate_app(settings: Settings | None = None) -> tuple[App, CrudConfig]:
    """Composition root - configure logging and build the app with its dispatch config.

    Callers register their resources with ``add_crud_handlers`` passing the
    returned config.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    config = CrudConfig.from_settings(settings, default_not_allowed_handler)
    return create_app(config), config


def run_server(app: App, settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
