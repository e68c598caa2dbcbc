"""Custom exceptions for the FastAPI backend."""

import json
from typing import Optional

from youtube_captions.core.errors import ErrorKind, TranscriptError


class APIError(Exception):
    """Base API exception class."""

    def __init__(
        self,
        detail: str,
        status_code: int = 500,
        error_code: str = "API_ERROR",
        debug_detail: Optional[str] = None
    ):
        self.detail = detail
        self.message = detail  # Alias for compatibility
        self.status_code = status_code
        self.error_code = error_code
        self.debug_detail = debug_detail
        super().__init__(detail)

    def to_dict(self, include_details: bool = False) -> dict:
        """Convert error to the response envelope."""
        body = {
            "success": False,
            "error": self.message,
            "code": self.error_code
        }
        if include_details and self.debug_detail:
            body["details"] = self.debug_detail
        return body

    def to_json(self, include_details: bool = False) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(include_details))


class ValidationError(APIError):
    """Validation error exception."""

    def __init__(self, detail: str, debug_detail: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=400,
            error_code=ErrorKind.INVALID_INPUT.value,
            debug_detail=debug_detail
        )


class NotFoundError(APIError):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found", error_code: str = "NOT_FOUND", debug_detail: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=404,
            error_code=error_code,
            debug_detail=debug_detail
        )


class GatewayTimeoutError(APIError):
    """Upstream timeout exception."""

    def __init__(self, detail: str = "Upstream service timed out", debug_detail: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=504,
            error_code=ErrorKind.UPSTREAM_TIMEOUT.value,
            debug_detail=debug_detail
        )


class InternalServerError(APIError):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error", error_code: str = "INTERNAL_ERROR", debug_detail: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=500,
            error_code=error_code,
            debug_detail=debug_detail
        )


def from_transcript_error(error: TranscriptError) -> APIError:
    """Map a classified transcript error onto its HTTP exception."""
    kind = error.kind
    if kind == ErrorKind.INVALID_INPUT:
        return ValidationError(error.message, debug_detail=error.detail)
    if kind in (ErrorKind.NO_CAPTIONS_FOUND, ErrorKind.LANGUAGE_UNAVAILABLE, ErrorKind.VIDEO_UNAVAILABLE):
        return NotFoundError(error.message, error_code=kind.value, debug_detail=error.detail)
    if kind == ErrorKind.UPSTREAM_TIMEOUT:
        return GatewayTimeoutError(error.message, debug_detail=error.detail)
    return InternalServerError(error.message, error_code=kind.value, debug_detail=error.detail)
