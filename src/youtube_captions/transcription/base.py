"""Interfaces for speech recognizers and audio acquirers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .models import RecognitionResult


class SpeechRecognizer(ABC):
    """Abstract interface for a speech-to-text engine."""

    @abstractmethod
    def transcribe(self, audio_path: Path, language: Optional[str] = None) -> RecognitionResult:  # noqa: D401
        """Return segmented speech for *audio_path*; ``language=None`` auto-detects."""


class AudioAcquirer(ABC):
    """Abstract interface for fetching recognizer-ready audio."""

    @abstractmethod
    def download(self, watch_url: str, workdir: Path) -> Path:
        """Download the lowest-bitrate audio-only stream into *workdir*."""

    @abstractmethod
    def transcode(self, source: Path, target: Path) -> Path:
        """Convert *source* to mono 16 kHz WAV at *target*."""
