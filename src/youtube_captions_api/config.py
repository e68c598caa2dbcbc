"""Configuration management for the FastAPI backend."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List


def _parse_origins() -> List[str]:
    origins_str = os.getenv("API_CORS_ORIGINS", "*")
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


@dataclass
class APIConfig:
    """API configuration settings."""

    # Core API settings
    host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "3000")))
    debug: bool = field(default_factory=lambda: os.getenv("API_DEBUG", "false").lower() == "true")

    # CORS settings
    cors_origins: List[str] = field(default_factory=_parse_origins)

    # Application metadata
    title: str = field(default_factory=lambda: os.getenv("API_TITLE", "YouTube Captions API"))
    description: str = "Transcripts for YouTube videos, generated with speech recognition when no captions exist"
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "0.1.0"))

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("API_LOG_LEVEL", "INFO"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.port < 1 or self.port > 65535:
            errors.append("API_PORT must be between 1 and 65535")

        return errors


@lru_cache()
def get_api_config() -> APIConfig:
    """Get validated API configuration."""
    config = APIConfig()

    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config
