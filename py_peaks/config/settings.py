"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PY_PEAKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Generation
    retry_limit: int = Field(
        default=100, ge=1, description="Attempts per bounded random draw"
    )
    max_detail: int = Field(
        default=20, ge=0, description="Maximum subdivision passes"
    )
    max_points: int = Field(
        default=2**20 + 1, ge=1, description="Maximum skyline points per call"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format (plain or json)")


settings = Settings()
