"""Fetch authored captions and classify provider failures."""

import asyncio
import re
from typing import List, Optional

from ..models.transcript import TranscriptItem
from ..utils.logging import get_logger
from .caption_provider import (
    CaptionProvider,
    RawCaption,
    ProviderCaptionsNotFound,
    ProviderLanguageUnavailable,
    ProviderVideoUnavailable,
)
from .errors import LanguageUnavailable, NoCaptionsFound, UpstreamTimeout, VideoUnavailable

logger = get_logger("caption_fetcher")

AVAILABLE_LANGUAGES_RE = re.compile(r'Available languages: (.*)')


def parse_available_languages(message: str) -> List[str]:
    """Pull the ``Available languages: a, b`` list out of a provider message."""
    match = AVAILABLE_LANGUAGES_RE.search(message or "")
    if not match:
        return []
    return [code.strip() for code in match.group(1).split(",") if code.strip()]


def to_transcript_items(raw: List[RawCaption]) -> List[TranscriptItem]:
    """Convert provider captions (milliseconds) to transcript items (seconds)."""
    return [
        TranscriptItem(
            text=item.text,
            start=item.offset_ms / 1000,
            duration=item.duration_ms / 1000,
            generated=False
        )
        for item in raw
    ]


class CaptionFetcher:
    """Client for the caption provider with language negotiation."""

    def __init__(self, provider: CaptionProvider, timeout: float = 30.0):
        self.provider = provider
        self.timeout = timeout

    async def fetch(self, video_id: str, lang: Optional[str] = None) -> List[TranscriptItem]:
        """
        Fetch the authored transcript for a video.

        Args:
            video_id: Canonical video ID
            lang: Normalized language code, or None for no preference

        Returns:
            Transcript items with ``generated=False``

        Raises:
            NoCaptionsFound: The provider has no transcript
            VideoUnavailable: The video does not exist or is inaccessible
            LanguageUnavailable: The requested language (and the single
                negotiated alternative) has no transcript
            UpstreamTimeout: The provider did not answer in time
        """
        try:
            raw = await self._call_provider(video_id, lang)
        except ProviderLanguageUnavailable as e:
            raw = await self._negotiate_language(video_id, e)
        except ProviderCaptionsNotFound as e:
            raise NoCaptionsFound(str(e)) from e
        except ProviderVideoUnavailable as e:
            raise VideoUnavailable(str(e)) from e

        if not raw:
            raise NoCaptionsFound(f"Provider returned no captions for video {video_id}")

        logger.info(f"Fetched {len(raw)} caption lines for video {video_id}")
        return to_transcript_items(raw)

    async def _negotiate_language(self, video_id: str, error: ProviderLanguageUnavailable) -> List[RawCaption]:
        original = LanguageUnavailable(error.requested, error.available_languages, detail=str(error))
        available = error.available_languages or parse_available_languages(str(error))
        if not available:
            raise original from error

        fallback = available[0]
        logger.info(
            f"Language {error.requested} not available for video {video_id}, "
            f"retrying with {fallback} (available: {', '.join(available)})"
        )
        try:
            raw = await self._call_provider(video_id, fallback)
        except (ProviderLanguageUnavailable, ProviderCaptionsNotFound) as retry_error:
            logger.warning(f"Retry with {fallback} failed for video {video_id}: {retry_error}")
            raise original from error
        except ProviderVideoUnavailable as retry_error:
            raise VideoUnavailable(str(retry_error)) from retry_error

        if not raw:
            raise original from error

        logger.info(f"Fetched transcript for video {video_id} in fallback language {fallback}")
        return raw

    async def _call_provider(self, video_id: str, lang: Optional[str]) -> List[RawCaption]:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.provider.fetch_transcript, video_id, lang),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise UpstreamTimeout("caption_fetch", self.timeout) from e
