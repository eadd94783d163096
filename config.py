"""Configuration management for the story and quiz services.

Uses Pydantic Settings for type-safe configuration with .env file support.
The same settings class serves all four processes; each process reads its
own environment.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services import ServiceDefinition


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Listener
    host: str = "0.0.0.0"
    port: int | None = Field(default=None, ge=1, le=65535)

    # HTTP surface
    allowed_origins: str = ""
    health_check_enabled: bool = False

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def resolve_port(self, service: ServiceDefinition) -> int:
        """Port to bind: the explicit override, else the service default."""
        if self.port is not None:
            return self.port
        return service.default_port


settings = Settings()
