"""Factories for speech recognizers and audio acquirers."""

from typing import Optional

from .audio import PipedAudioAcquirer, YtDlpAudioAcquirer
from .base import AudioAcquirer, SpeechRecognizer
from .whisper import GroqWhisperRecognizer, OpenAIWhisperRecognizer


class RecognizerFactory:
    """Factory for creating speech recognizers."""

    @staticmethod
    def create_recognizer(provider: str = "openai", model_name: Optional[str] = None, **kwargs) -> SpeechRecognizer:
        """
        Create a recognizer instance based on provider.

        Args:
            provider: 'openai' or 'groq'
            model_name: Model to use; the provider default when None
            **kwargs: Additional arguments to pass to the recognizer constructor

        Returns:
            A SpeechRecognizer implementation

        Raises:
            ValueError: If provider is not supported
        """
        provider = (provider or "openai").lower()
        if provider == "openai":
            return OpenAIWhisperRecognizer(model=model_name, **kwargs)
        if provider == "groq":
            return GroqWhisperRecognizer(model=model_name, **kwargs)
        raise ValueError(f"Unsupported transcription provider: {provider}")


class AcquirerFactory:
    """Factory for creating audio acquirers."""

    @staticmethod
    def create_acquirer(backend: str = "yt-dlp", **kwargs) -> AudioAcquirer:
        """
        Create an audio acquirer for the given download backend.

        Raises:
            ValueError: If backend is not supported
        """
        backend = (backend or "yt-dlp").lower()
        if backend == "yt-dlp":
            return YtDlpAudioAcquirer(proxy=kwargs.get("proxy"))
        if backend == "piped":
            return PipedAudioAcquirer(base_url=kwargs.get("base_url"))
        raise ValueError(f"Unsupported audio backend: {backend}")
