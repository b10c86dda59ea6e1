"""Module: config."""

from pydantic_settings import BaseSettings

# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # Primary SQLAlchemy connection string for the backend database.
    database_url: str
    # Swagger UI and ReDoc are only mounted in development.
    environment: str = "development"
    log_level: str = "INFO"
    # Browser origins allowed to call the API. The static client may be served from anywhere.
    cors_origins: list[str] = ["*"]
    # Phone value that promotes a name-matched employee to the admin role at login.
    admin_phone: str = "111-111-1111"
    # Lifetime of a login session token.
    session_ttl_minutes: int = 480

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

    @property
    def docs_enabled(self) -> bool:
        return self.environment.lower() == "development"

# Global settings instance imported by app modules at runtime.
settings = Settings()
