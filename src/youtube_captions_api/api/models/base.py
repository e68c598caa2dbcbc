"""Base response models for the API."""

from datetime import datetime
from typing import Optional, TypeVar, Generic
from pydantic import BaseModel, Field


T = TypeVar('T')


class BaseResponse(BaseModel):
    """Base response model."""

    success: bool


class SuccessResponse(BaseResponse, Generic[T]):
    """Success response model."""

    success: bool = True
    data: T


class ErrorResponse(BaseResponse):
    """Error envelope returned for every failed request."""

    success: bool = False
    error: str
    code: str
    details: Optional[str] = None


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime = Field(default_factory=datetime.now)
    version: str
    environment: Optional[str] = None


class HealthResponse(SuccessResponse[HealthStatus]):
    """Health check response model."""
    pass
