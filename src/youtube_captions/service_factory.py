"""Factory for creating and configuring services."""

from typing import Optional

from .core.caption_fetcher import CaptionFetcher
from .core.caption_provider import CaptionProvider, YouTubeTranscriptApiProvider
from .core.config import Config, get_config
from .services.transcript_service import TranscriptResolver
from .transcription.base import AudioAcquirer, SpeechRecognizer
from .transcription.factory import AcquirerFactory, RecognizerFactory
from .transcription.generator import CaptionGenerator
from .utils.logging import get_logger

logger = get_logger("service_factory")


class ServiceFactory:
    """Factory for creating and managing service dependencies."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self._caption_provider = None
        self._caption_fetcher = None
        self._audio_acquirer = None
        self._speech_recognizer = None
        self._caption_generator = None
        self._transcript_resolver = None

        logger.info("Initialized ServiceFactory")

    def get_caption_provider(self) -> CaptionProvider:
        """Get or create the caption provider."""
        if self._caption_provider is None:
            provider_config = self.config.provider
            self._caption_provider = YouTubeTranscriptApiProvider(
                proxy_http=provider_config.proxy_http,
                proxy_https=provider_config.proxy_https
            )
        return self._caption_provider

    def get_caption_fetcher(self) -> CaptionFetcher:
        """Get or create the caption fetcher."""
        if self._caption_fetcher is None:
            self._caption_fetcher = CaptionFetcher(
                self.get_caption_provider(),
                timeout=self.config.provider.timeout
            )
        return self._caption_fetcher

    def get_audio_acquirer(self) -> AudioAcquirer:
        """Get or create the audio acquirer."""
        if self._audio_acquirer is None:
            generation = self.config.generation
            self._audio_acquirer = AcquirerFactory.create_acquirer(
                generation.audio_backend,
                proxy=self.config.provider.proxy_https or self.config.provider.proxy_http,
                base_url=generation.piped_base_url
            )
        return self._audio_acquirer

    def get_speech_recognizer(self) -> SpeechRecognizer:
        """Get or create the speech recognizer."""
        if self._speech_recognizer is None:
            generation = self.config.generation
            self._speech_recognizer = RecognizerFactory.create_recognizer(
                generation.transcription_provider,
                model_name=generation.transcription_model
            )
        return self._speech_recognizer

    def get_caption_generator(self) -> CaptionGenerator:
        """Get or create the caption generator."""
        if self._caption_generator is None:
            generation = self.config.generation
            self._caption_generator = CaptionGenerator(
                self.get_audio_acquirer(),
                self.get_speech_recognizer(),
                audio_dir=generation.audio_dir,
                keep_audio=generation.keep_audio,
                download_timeout=generation.download_timeout,
                recognition_timeout=generation.recognition_timeout
            )
        return self._caption_generator

    def get_transcript_resolver(self) -> TranscriptResolver:
        """Get or create the transcript resolver."""
        if self._transcript_resolver is None:
            self._transcript_resolver = TranscriptResolver(
                self.get_caption_fetcher(),
                self.get_caption_generator()
            )
        return self._transcript_resolver


# Global service factory instance
_service_factory = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory
    if _service_factory is None:
        _service_factory = ServiceFactory()
    return _service_factory


def reset_service_factory():
    """Drop the global factory (used by tests and config reloads)."""
    global _service_factory
    _service_factory = None
