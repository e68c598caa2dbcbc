"""
Configuration for the YouTube captions service.
All tunables are read from environment variables (optionally via a .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


# =============================================================================
# LOGGING
# =============================================================================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# CAPTION PROVIDER
# =============================================================================

@dataclass
class ProviderConfig:
    """Caption provider settings."""
    timeout: float = field(default_factory=lambda: float(os.getenv('CAPTION_PROVIDER_TIMEOUT', '30')))
    proxy_http: Optional[str] = field(default_factory=lambda: os.getenv('YOUTUBE_PROXY_HTTP'))
    proxy_https: Optional[str] = field(default_factory=lambda: os.getenv('YOUTUBE_PROXY_HTTPS'))

# =============================================================================
# CAPTION GENERATION
# =============================================================================

@dataclass
class GenerationConfig:
    """Audio acquisition and speech recognition settings."""
    audio_dir: str = field(default_factory=lambda: os.getenv('AUDIO_DIR', str(Path.cwd() / 'temp')))
    keep_audio: bool = field(default_factory=lambda: _env_bool('KEEP_AUDIO'))
    audio_backend: str = field(default_factory=lambda: os.getenv('AUDIO_BACKEND', 'yt-dlp'))
    piped_base_url: Optional[str] = field(default_factory=lambda: os.getenv('PIPED_BASE_URL'))

    transcription_provider: str = field(default_factory=lambda: os.getenv('TRANSCRIPTION_PROVIDER', 'openai'))
    transcription_model: Optional[str] = field(default_factory=lambda: os.getenv('TRANSCRIPTION_MODEL'))

    download_timeout: float = field(default_factory=lambda: float(os.getenv('AUDIO_DOWNLOAD_TIMEOUT', '300')))
    recognition_timeout: float = field(default_factory=lambda: float(os.getenv('RECOGNITION_TIMEOUT', '600')))

# =============================================================================
# AGGREGATE
# =============================================================================

@dataclass
class Config:
    """Complete service configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.provider.timeout <= 0:
            errors.append("CAPTION_PROVIDER_TIMEOUT must be positive")
        if self.generation.download_timeout <= 0:
            errors.append("AUDIO_DOWNLOAD_TIMEOUT must be positive")
        if self.generation.recognition_timeout <= 0:
            errors.append("RECOGNITION_TIMEOUT must be positive")
        if self.generation.audio_backend not in ('yt-dlp', 'piped'):
            errors.append("AUDIO_BACKEND must be 'yt-dlp' or 'piped'")
        if self.generation.transcription_provider not in ('openai', 'groq'):
            errors.append("TRANSCRIPTION_PROVIDER must be 'openai' or 'groq'")

        return errors


@lru_cache()
def get_config() -> Config:
    """Get validated service configuration."""
    config = Config()

    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config


def setup_logging(config: Optional[Config] = None):
    """Configure root logging for the application."""
    logging_config = (config or get_config()).logging
    logging.basicConfig(
        level=getattr(logging, logging_config.level.upper(), logging.INFO),
        format=logging_config.format,
        datefmt=logging_config.date_format
    )
