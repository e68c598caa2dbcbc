"""Transcript request and response models."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .base import SuccessResponse


class TranscriptRequest(BaseModel):
    """Request body for transcript resolution; accepts camelCase or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = Field(None, description="YouTube video URL")
    video_id: Optional[str] = Field(None, alias="videoId", description="YouTube video ID")
    lang: Optional[str] = Field(None, description="Language name or code, e.g. 'Spanish' or 'es'")
    generate_if_not_found: bool = Field(
        True,
        alias="generateIfNotFound",
        description="Generate captions with speech recognition when none exist"
    )

    @model_validator(mode="after")
    def blank_to_none(self):
        # Blank strings count as missing
        if self.url is not None and not self.url.strip():
            self.url = None
        if self.video_id is not None and not self.video_id.strip():
            self.video_id = None
        return self


class TranscriptItemModel(BaseModel):
    """A single time-coded caption line, in seconds."""

    text: str
    start: float
    duration: float
    generated: bool = False


class TranscriptData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId")
    transcript: List[TranscriptItemModel]
    generated: bool = False


class TranscriptResponse(SuccessResponse[TranscriptData]):
    """Successful transcript response."""
    pass


class LanguageInfo(BaseModel):
    name: str
    code: str


class LanguagesResponse(SuccessResponse[List[LanguageInfo]]):
    """Supported language names and their codes."""
    pass
