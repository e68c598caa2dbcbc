"""Utility functions for working with YouTube video references."""

import re
from typing import Optional
from urllib.parse import urlparse, parse_qs

from .logging import get_logger

logger = get_logger("utils.youtube")

VIDEO_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{11}$')
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def is_valid_video_id(value: Optional[str]) -> bool:
    """Return True if *value* is a canonical 11-character video ID."""
    return bool(value) and VIDEO_ID_PATTERN.match(value) is not None


def build_watch_url(video_id: str) -> str:
    """Build the canonical watch URL for a video ID."""
    return WATCH_URL.format(video_id=video_id)


def extract_video_id(value: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Supported formats:
        - https://www.youtube.com/watch?v=VIDEO_ID
        - https://youtu.be/VIDEO_ID
        - https://www.youtube.com/embed/VIDEO_ID
        - https://www.youtube.com/v/VIDEO_ID

    Args:
        value: YouTube URL or video ID

    Returns:
        Video ID or None if the input could not be resolved
    """
    if not value:
        return None

    # Already a video ID
    if is_valid_video_id(value):
        return value

    try:
        parsed = urlparse(value)
        host = parsed.hostname or ""
        path = parsed.path or ""
    except ValueError as e:
        logger.debug(f"Could not parse URL {value!r}: {e}")
        return None

    candidate = None
    if host == "youtu.be":
        candidate = path[1:]
    elif "youtube.com" in host:
        if path == "/watch":
            candidate = (parse_qs(parsed.query).get("v") or [None])[0]
        elif path.startswith("/embed/") or path.startswith("/v/"):
            candidate = path.split("/")[2]

    if candidate and is_valid_video_id(candidate):
        return candidate

    logger.debug(f"Could not extract video ID from: {value!r}")
    return None
