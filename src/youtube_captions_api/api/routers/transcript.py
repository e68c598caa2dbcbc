"""YouTube transcript router."""

import logging

from fastapi import APIRouter, Depends

from youtube_captions.services.transcript_service import TranscriptResolver
from youtube_captions.utils.language_utils import get_supported_languages

from ...api.models.transcript import (
    LanguageInfo,
    LanguagesResponse,
    TranscriptData,
    TranscriptItemModel,
    TranscriptRequest,
    TranscriptResponse
)
from ...dependencies import get_transcript_resolver
from ...exceptions import from_transcript_error

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/transcript", response_model=TranscriptResponse)
async def get_transcript(
    request: TranscriptRequest,
    resolver: TranscriptResolver = Depends(get_transcript_resolver)
):
    """
    Resolve the transcript of a YouTube video.

    Authored captions are preferred; when none exist and
    ``generateIfNotFound`` is set, captions are generated from the audio.

    Args:
        request: Transcript request
        resolver: TranscriptResolver instance

    Returns:
        Transcript items with their timings in seconds

    Raises:
        APIError: If the transcript cannot be resolved
    """
    outcome = await resolver.resolve(
        url=request.url,
        video_id=request.video_id,
        lang=request.lang,
        generate_if_not_found=request.generate_if_not_found
    )

    if not outcome.success:
        logger.info(f"Transcript request failed with {outcome.error.kind.value}: {outcome.error.detail}")
        raise from_transcript_error(outcome.error)

    return TranscriptResponse(
        data=TranscriptData(
            video_id=outcome.video_id,
            transcript=[TranscriptItemModel(**item.to_dict()) for item in outcome.items],
            generated=outcome.generated
        )
    )


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    """List the language names accepted in the ``lang`` field."""
    return LanguagesResponse(
        data=[
            LanguageInfo(name=name.capitalize(), code=code)
            for name, code in get_supported_languages().items()
        ]
    )
