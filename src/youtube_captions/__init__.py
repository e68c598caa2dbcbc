"""Resolve YouTube videos to time-coded transcripts, generating them when needed."""

__version__ = "0.1.0"

from .core.errors import ErrorKind, TranscriptError
from .models.transcript import TranscriptItem, ResolutionOutcome
from .services.transcript_service import TranscriptResolver
from .service_factory import ServiceFactory, get_service_factory

__all__ = [
    "ErrorKind",
    "TranscriptError",
    "TranscriptItem",
    "ResolutionOutcome",
    "TranscriptResolver",
    "ServiceFactory",
    "get_service_factory"
]
