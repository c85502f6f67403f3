"""
Configuration settings for FastAPI application.
"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field
from config.settings import app_config

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000", "https://documents.villa-claudia.eu"]


class FastAPISettings(BaseSettings):
    """FastAPI application settings with environment variable loading."""

    # Application settings
    app_name: str = Field(default="Villa Claudia Documents API", description="Application name")
    app_description: str = Field(default="Guest travel document uploads for Villa Claudia", description="Application description")
    app_version: str = Field(default="1.0.0", description="Application version")

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8001, description="Server port")
    environment: str = Field(default="development", description="Environment (development, staging, production)")

    # API settings
    api_version: str = Field(default="v1", description="API version")
    api_prefix: str = Field(default="/api", description="API prefix")

    # Comma separated; kept as a string so the env value is not JSON decoded
    cors_origins: Optional[str] = Field(default=None, description="Allowed CORS origins")

    # Logging
    log_level: str = Field(default_factory=lambda: app_config.log_level, description="Logging level")

    # Shared secrets
    jwt_secret: str = Field(default="your-secret-key-change-this-in-production", description="Magic link signing secret")
    admin_password: str = Field(default="villa-claudia-admin", description="Admin panel password")
    scheduler_api_key: str = Field(default="change-this-in-production", description="Bearer secret for the reminder scheduler")

    model_config = {"extra": "ignore", "env_file": ".env"}

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins from the environment or return the defaults."""
        if not self.cors_origins:
            return DEFAULT_CORS_ORIGINS
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or DEFAULT_CORS_ORIGINS


# Global settings instance
settings = FastAPISettings()
