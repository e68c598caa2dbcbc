"""Service that resolves a video reference into a transcript."""

from typing import Optional

from ..core.caption_fetcher import CaptionFetcher
from ..core.errors import (
    GenerationFailed,
    InternalError,
    InvalidInput,
    NoCaptionsFound,
    TranscriptError,
)
from ..models.transcript import ResolutionOutcome
from ..transcription.generator import AUTO_LANGUAGE, CaptionGenerator
from ..utils.language_utils import get_language_code
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("transcript_service")

MISSING_REFERENCE = "You must provide a video URL or video ID"


class TranscriptResolver:
    """Resolve a URL or video ID to authored captions, falling back to generation."""

    def __init__(self, caption_fetcher: CaptionFetcher, caption_generator: Optional[CaptionGenerator] = None):
        self.caption_fetcher = caption_fetcher
        self.caption_generator = caption_generator
        logger.info("Initialized TranscriptResolver")

    async def resolve(
        self,
        url: Optional[str] = None,
        video_id: Optional[str] = None,
        lang: Optional[str] = None,
        generate_if_not_found: bool = True
    ) -> ResolutionOutcome:
        """
        Resolve a transcript for a video.

        Args:
            url: YouTube URL (or raw video ID)
            video_id: Video ID; takes precedence over ``url``
            lang: Language name or code, optional
            generate_if_not_found: Generate captions with speech recognition
                when the provider has none

        Returns:
            ResolutionOutcome carrying either transcript items or a classified error
        """
        if not url and not video_id:
            return ResolutionOutcome.failure(InvalidInput(message=MISSING_REFERENCE))

        target_id = extract_video_id(video_id or url)
        if not target_id:
            return ResolutionOutcome.failure(
                InvalidInput(f"Could not resolve a video ID from {video_id or url!r}")
            )

        language = get_language_code(lang)
        if lang and not language:
            logger.info(f"Unknown language {lang!r}, fetching without a language preference")

        try:
            items = await self.caption_fetcher.fetch(target_id, language)
            return ResolutionOutcome.ok(target_id, items)
        except NoCaptionsFound as e:
            if not generate_if_not_found:
                logger.info(f"No captions found for video {target_id}; generation disabled")
                return ResolutionOutcome.failure(e, target_id)
            logger.info(f"No captions found for video {target_id}, trying to generate...")
        except TranscriptError as e:
            logger.warning(f"Transcript lookup failed for video {target_id}: {e.detail}")
            return ResolutionOutcome.failure(e, target_id)
        except Exception as e:
            logger.exception(f"Error getting transcript for video {target_id}")
            error = InternalError(f"{type(e).__name__}: {e}")
            error.__cause__ = e
            return ResolutionOutcome.failure(error, target_id)

        return await self._generate(target_id, language)

    async def _generate(self, video_id: str, language: Optional[str]) -> ResolutionOutcome:
        if self.caption_generator is None:
            return ResolutionOutcome.failure(
                GenerationFailed("Caption generation is not configured"), video_id
            )
        try:
            items = await self.caption_generator.generate(video_id, language or AUTO_LANGUAGE)
            return ResolutionOutcome.ok(video_id, items)
        except TranscriptError as e:
            logger.error(f"Failed to generate captions for video {video_id}: {e.detail}")
            return ResolutionOutcome.failure(e, video_id)
        except Exception as e:
            logger.exception(f"Unexpected error generating captions for video {video_id}")
            error = GenerationFailed(f"{type(e).__name__}: {e}")
            error.__cause__ = e
            return ResolutionOutcome.failure(error, video_id)
