"""
Caption provider capability and its youtube-transcript-api implementation.

Providers return raw caption lines with millisecond timings and report
failures through a small closed set of exceptions, so callers never have to
inspect error messages to decide what went wrong.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    TranscriptsDisabled,
    VideoUnavailable,
    VideoUnplayable,
    InvalidVideoId,
    AgeRestricted,
)
from youtube_transcript_api.proxies import GenericProxyConfig

from ..utils.logging import get_logger

logger = get_logger("caption_provider")


@dataclass
class RawCaption:
    """Caption line as delivered by a provider (timings in milliseconds)."""
    text: str
    offset_ms: float
    duration_ms: float


class ProviderError(Exception):
    """Base class for classified provider failures."""


class ProviderCaptionsNotFound(ProviderError):
    """The video has no transcripts at all (or they are disabled)."""


class ProviderVideoUnavailable(ProviderError):
    """The video itself is missing, private or unplayable."""


class ProviderLanguageUnavailable(ProviderError):
    """Transcripts exist, but none in the requested language."""

    def __init__(self, video_id: str, requested: str, available_languages: Optional[List[str]] = None):
        self.video_id = video_id
        self.requested = requested
        self.available_languages = list(available_languages or [])
        message = f"No transcripts are available in {requested} for video {video_id}"
        if self.available_languages:
            message += f". Available languages: {', '.join(self.available_languages)}"
        super().__init__(message)


class CaptionProvider(ABC):
    """Abstract interface for an authored-caption source."""

    @abstractmethod
    def fetch_transcript(self, video_id: str, lang: Optional[str] = None) -> List[RawCaption]:
        """Return caption lines for *video_id* in *lang* (any language if None)."""


class YouTubeTranscriptApiProvider(CaptionProvider):
    """Fetch authored captions through youtube-transcript-api."""

    def __init__(self, proxy_http: Optional[str] = None, proxy_https: Optional[str] = None):
        proxy_config = None
        if proxy_http or proxy_https:
            proxy_config = GenericProxyConfig(http_url=proxy_http, https_url=proxy_https)
        self._api = YouTubeTranscriptApi(proxy_config=proxy_config)

    def fetch_transcript(self, video_id: str, lang: Optional[str] = None) -> List[RawCaption]:
        try:
            transcript_list = self._api.list(video_id)
        except TranscriptsDisabled as e:
            raise ProviderCaptionsNotFound(f"Transcripts are disabled for video {video_id}") from e
        except (VideoUnavailable, VideoUnplayable, InvalidVideoId, AgeRestricted) as e:
            raise ProviderVideoUnavailable(f"Video unavailable: {video_id}") from e

        transcripts = list(transcript_list)
        if not transcripts:
            raise ProviderCaptionsNotFound(f"Could not find any transcripts for video {video_id}")

        if lang:
            transcript = self._find_language(transcript_list, lang)
            if transcript is None:
                available = _unique([t.language_code for t in transcripts])
                raise ProviderLanguageUnavailable(video_id, lang, available)
        else:
            # Manually created tracks sort ahead of auto-generated ones
            manual = [t for t in transcripts if not t.is_generated]
            transcript = (manual or transcripts)[0]

        logger.debug(
            f"Fetching {transcript.language_code} transcript for {video_id} "
            f"(generated={transcript.is_generated})"
        )
        fetched = transcript.fetch()
        return [
            RawCaption(
                text=snippet.text,
                offset_ms=round(snippet.start * 1000),
                duration_ms=round(snippet.duration * 1000)
            )
            for snippet in fetched
        ]

    @staticmethod
    def _find_language(transcript_list, lang: str):
        # Manually created tracks win over auto-generated ones for the same code
        ordered = sorted(transcript_list, key=lambda t: t.is_generated)
        wanted = lang.lower()
        candidates = [wanted]
        base = wanted.split("-")[0]
        if base != wanted:
            candidates.append(base)
        # Track codes keep their region casing ("pt-BR"); compare case-insensitively
        for code in candidates:
            for transcript in ordered:
                if transcript.language_code.lower() == code:
                    return transcript
        return None


def _unique(codes: List[str]) -> List[str]:
    seen = []
    for code in codes:
        if code not in seen:
            seen.append(code)
    return seen
