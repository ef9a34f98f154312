"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (API docs, access log). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: Port the server listens on.
        request_timeout_seconds: Upper bound on handling a single request.
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Forgery"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "localhost"
    port: int = 8080
    request_timeout_seconds: float = 30.0
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
