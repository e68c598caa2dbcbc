"""API models for request and response validation."""

from .base import BaseResponse, SuccessResponse, ErrorResponse, HealthStatus, HealthResponse
from .transcript import (
    TranscriptRequest,
    TranscriptItemModel,
    TranscriptData,
    TranscriptResponse,
    LanguageInfo,
    LanguagesResponse
)

__all__ = [
    "BaseResponse",
    "SuccessResponse",
    "ErrorResponse",
    "HealthStatus",
    "HealthResponse",
    "TranscriptRequest",
    "TranscriptItemModel",
    "TranscriptData",
    "TranscriptResponse",
    "LanguageInfo",
    "LanguagesResponse"
]
