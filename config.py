"""Configuration management for URL shortener."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    # URL shortener settings
    key_length: int = Field(
        default=5,
        ge=1,
        le=32,
        description="Length of generated short keys"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=0,
        description="Extra attempts when a generated key is already taken"
    )

    trust_forwarded_host: bool = Field(
        default=False,
        description="Render short links with X-Forwarded-Host when behind a proxy"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case (uvicorn takes the lowercased name)."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
