"""Service layer for transcript resolution."""

from .transcript_service import TranscriptResolver

__all__ = ['TranscriptResolver']
