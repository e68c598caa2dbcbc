"""Pytest configuration and fixtures for the YouTube captions tests."""

import os
import sys
import pytest
from unittest.mock import AsyncMock, Mock

# Make the src layout and the shared mocks importable without installation
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(ROOT, 'src'))
sys.path.insert(0, os.path.dirname(__file__))

# Set test environment variables before importing app
os.environ["API_DEBUG"] = "true"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

from fastapi.testclient import TestClient

from youtube_captions.core.caption_fetcher import CaptionFetcher
from youtube_captions.models.transcript import ResolutionOutcome
from youtube_captions.transcription.generator import CaptionGenerator
from youtube_captions.services.transcript_service import TranscriptResolver
from youtube_captions_api.app import create_app
from youtube_captions_api.config import get_api_config
from youtube_captions_api.dependencies import get_transcript_resolver

from mocks.mock_services import (
    MockAudioAcquirer,
    MockCaptionProvider,
    MockSpeechRecognizer,
    raw_captions
)


VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def english_captions():
    """Two caption lines as the provider reports them (milliseconds)."""
    return raw_captions(("Hello", 1500, 2500), ("World", 4000, 1000))


@pytest.fixture
def caption_provider(english_captions):
    return MockCaptionProvider({None: english_captions, "en": english_captions})


@pytest.fixture
def caption_fetcher(caption_provider):
    return CaptionFetcher(caption_provider, timeout=5)


@pytest.fixture
def audio_acquirer():
    return MockAudioAcquirer()


@pytest.fixture
def speech_recognizer():
    return MockSpeechRecognizer()


@pytest.fixture
def audio_dir(tmp_path):
    path = tmp_path / "audio"
    path.mkdir()
    return path


@pytest.fixture
def caption_generator(audio_acquirer, speech_recognizer, audio_dir):
    return CaptionGenerator(audio_acquirer, speech_recognizer, audio_dir=audio_dir)


@pytest.fixture
def transcript_resolver(caption_fetcher, caption_generator):
    return TranscriptResolver(caption_fetcher, caption_generator)


@pytest.fixture
def mock_resolver():
    """Resolver double for API tests; set ``resolve.return_value`` per test."""
    resolver = Mock(spec=TranscriptResolver)
    resolver.resolve = AsyncMock(return_value=ResolutionOutcome.ok(VIDEO_ID, []))
    return resolver


@pytest.fixture
def api_config():
    """Get test API configuration."""
    get_api_config.cache_clear()
    yield get_api_config()
    get_api_config.cache_clear()


@pytest.fixture
def app(api_config, mock_resolver):
    """Create FastAPI test application with the resolver replaced."""
    application = create_app()
    application.dependency_overrides[get_transcript_resolver] = lambda: mock_resolver
    return application


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
