"""
Utility modules for the YouTube captions service.
"""

from .logging import setup_logger, get_logger
from .youtube_utils import extract_video_id, is_valid_video_id, build_watch_url
from .language_utils import get_language_code, get_language_name, get_supported_languages

__all__ = [
    'setup_logger',
    'get_logger',
    'extract_video_id',
    'is_valid_video_id',
    'build_watch_url',
    'get_language_code',
    'get_language_name',
    'get_supported_languages'
]
