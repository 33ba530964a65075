"""Application configuration from environment variables."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from crudgate.application.ports import NotAllowedHandler


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # CRUD dispatch
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )
    strict_permissions: bool = Field(
        default=False,
        description="Report permission denials to the error handler instead of ignoring them",
    )

    # Keycloak OIDC
    keycloak_url: str = Field(
        default="http://localhost:8080",
        description="Keycloak server URL",
    )
    keycloak_realm: str = Field(default="crudgate", description="Keycloak realm")
    keycloak_client_id: str = Field(default="crudgate-api", description="Keycloak client ID")
    keycloak_client_secret: str = Field(default="", description="Keycloak client secret")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    @property
    def cors_origin_list(self) -> list[str]:
        """Allowed origins with blanks dropped."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class CrudConfig:
    """Process-wide dispatch configuration, built once and shared by registrations."""

    not_allowed_handler: NotAllowedHandler
    allowed_origins: tuple[str, ...] = ()
    strict_permissions: bool = False

    @classmethod
    def from_settings(
        cls, settings: Settings, not_allowed_handler: NotAllowedHandler
    ) -> "CrudConfig":
        """Build config from environment settings."""
        return cls(
            not_allowed_handler=not_allowed_handler,
            allowed_origins=tuple(settings.cors_origin_list),
            strict_permissions=settings.strict_permissions,
        )


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
