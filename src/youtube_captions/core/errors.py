"""Error taxonomy for transcript resolution."""

from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    """Classified failure kinds surfaced to callers."""
    INVALID_INPUT = "INVALID_INPUT"
    VIDEO_UNAVAILABLE = "VIDEO_UNAVAILABLE"
    NO_CAPTIONS_FOUND = "NO_CAPTIONS_FOUND"
    LANGUAGE_UNAVAILABLE = "LANGUAGE_UNAVAILABLE"
    GENERATION_FAILED = "GENERATION_FAILED"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    INTERNAL = "INTERNAL"


class TranscriptError(Exception):
    """
    Base class for classified transcript failures.

    ``message`` is safe to show to callers; ``detail`` is diagnostic text
    that is only exposed in debug mode.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "Error retrieving transcript"

    def __init__(self, detail: Optional[str] = None, message: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail or self.message
        super().__init__(self.detail)


class InvalidInput(TranscriptError):
    """No usable video reference was supplied."""
    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid video URL or video ID format"


class VideoUnavailable(TranscriptError):
    """The video does not exist or cannot be accessed."""
    kind = ErrorKind.VIDEO_UNAVAILABLE
    default_message = "Video is unavailable or does not exist"


class NoCaptionsFound(TranscriptError):
    """The provider has no transcript for the video."""
    kind = ErrorKind.NO_CAPTIONS_FOUND
    default_message = "No captions found for this video"


class LanguageUnavailable(TranscriptError):
    """Captions exist, but not in the requested language."""
    kind = ErrorKind.LANGUAGE_UNAVAILABLE
    default_message = "No captions available in the requested language"

    def __init__(
        self,
        requested: Optional[str],
        available_languages: Optional[List[str]] = None,
        detail: Optional[str] = None
    ):
        self.requested = requested
        self.available_languages = list(available_languages or [])
        if detail is None:
            detail = f"No transcripts are available in {requested}"
            if self.available_languages:
                detail += f". Available languages: {', '.join(self.available_languages)}"
        super().__init__(detail)


class GenerationFailed(TranscriptError):
    """Audio acquisition or speech recognition failed."""
    kind = ErrorKind.GENERATION_FAILED
    default_message = "Failed to generate captions for the video"


class UpstreamTimeout(TranscriptError):
    """An external call did not finish in time."""
    kind = ErrorKind.UPSTREAM_TIMEOUT
    default_message = "Upstream service timed out"

    def __init__(self, stage: str, timeout: Optional[float] = None):
        self.stage = stage
        self.timeout = timeout
        detail = f"{stage} timed out"
        if timeout is not None:
            detail += f" after {timeout:g}s"
        super().__init__(detail)


class InternalError(TranscriptError):
    """Unclassified failure; the cause is kept for diagnostics."""
    kind = ErrorKind.INTERNAL
