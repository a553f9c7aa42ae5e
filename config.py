"""Configuration management for the Applicant Checks service.

Uses Pydantic Settings for type-safe configuration with .env file support.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Mask SSN and email values in diagnostic log lines
    redact_pii: bool = True

    # Service Configuration
    service_name: str = "applicant-checks"
    version: str = "0.1.0"
    port: int = 8000


settings = Settings()
