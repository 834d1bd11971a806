"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        upstream_base_url: Scheme and host of the employee-record service.
        upstream_employees_path: Path of the employee collection upstream.
        upstream_timeout_seconds: Timeout for every upstream call.
        top_earners_limit: Number of names in the top earners view.
        rate_limit_enabled: Turn request rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        host: Interface the CLI server binds to.
        port: Port the CLI server listens on.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Employee API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    upstream_base_url: str = "http://localhost:8112"
    upstream_employees_path: str = "/api/v1/employee"
    upstream_timeout_seconds: float = 5.0  # httpx default

    top_earners_limit: int = 10

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    host: str = "0.0.0.0"
    port: int = 8111


settings = Settings()
