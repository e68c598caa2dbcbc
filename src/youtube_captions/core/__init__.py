"""Core modules for transcript resolution."""

from .config import Config, get_config, setup_logging
from .errors import (
    ErrorKind,
    TranscriptError,
    InvalidInput,
    VideoUnavailable,
    NoCaptionsFound,
    LanguageUnavailable,
    GenerationFailed,
    UpstreamTimeout,
    InternalError
)

__all__ = [
    'Config',
    'get_config',
    'setup_logging',
    'ErrorKind',
    'TranscriptError',
    'InvalidInput',
    'VideoUnavailable',
    'NoCaptionsFound',
    'LanguageUnavailable',
    'GenerationFailed',
    'UpstreamTimeout',
    'InternalError'
]
