import os
from pathlib import Path
from typing import Any, List, Optional

from groq import Groq
from openai import OpenAI

from .base import SpeechRecognizer
from .models import RecognitionResult, RecognitionSegment
from ..utils.logging import get_logger

logger = get_logger("transcription.whisper")


class RecognitionError(Exception):
    """Raised when the speech recognition service fails or returns nothing."""


def _field(obj: Any, name: str, default: Any = None) -> Any:
    # SDK responses expose segments as objects or dicts depending on version
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def parse_verbose_response(resp: Any) -> RecognitionResult:
    """Convert a ``verbose_json`` transcription response into segments."""
    raw_segments = _field(resp, "segments") or []
    language = _field(resp, "language")
    if not raw_segments:
        text = (_field(resp, "text") or "").strip()
        if not text:
            raise RecognitionError("Recognizer returned no transcript text.")
        return RecognitionResult(segments=[RecognitionSegment(text=text, start=0.0, end=0.0)], language=language)

    segments: List[RecognitionSegment] = []
    for seg in raw_segments:
        start = float(_field(seg, "start", 0) or 0)
        end = float(_field(seg, "end", start) or start)
        text = (_field(seg, "text", "") or "").strip()
        if not text:
            continue
        segments.append(RecognitionSegment(text=text, start=start, end=end))
    return RecognitionResult(segments=segments, language=language)


class WhisperRecognizer(SpeechRecognizer):
    """Transcribe audio files with a Whisper-compatible transcription API."""

    provider = "whisper"
    default_model = "whisper-1"
    api_key_env = ""

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None, client: Any = None):
        self.model = model or self.default_model
        self.api_key = api_key or os.environ.get(self.api_key_env)
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Any:
        raise NotImplementedError

    def transcribe(self, audio_path: Path, language: Optional[str] = None) -> RecognitionResult:
        logger.debug(f"[{self.provider.upper()}] Transcribing {audio_path} (model={self.model}, language={language or 'auto'})")
        try:
            with open(audio_path, "rb") as audio_file:
                params = {
                    "file": audio_file,
                    "model": self.model,
                    "response_format": "verbose_json",
                    "timestamp_granularities": ["segment"],
                    "temperature": 0.0
                }
                # Omitting the language lets the model auto-detect it
                if language:
                    params["language"] = language.split("-")[0]
                resp = self.client.audio.transcriptions.create(**params)
        except Exception as e:
            logger.error("%s Whisper API error: %s", self.provider, str(e))
            raise RecognitionError(f"{self.provider} Whisper API failed: {str(e)}") from e

        result = parse_verbose_response(resp)
        logger.info(f"[{self.provider.upper()}] Recognized {len(result.segments)} segments (language={result.language})")
        return result


class OpenAIWhisperRecognizer(WhisperRecognizer):
    """OpenAI hosted Whisper."""

    provider = "openai"
    default_model = "whisper-1"
    api_key_env = "OPENAI_API_KEY"

    def _create_client(self) -> OpenAI:
        return OpenAI(api_key=self.api_key)


class GroqWhisperRecognizer(WhisperRecognizer):
    """Groq hosted Whisper."""

    provider = "groq"
    default_model = "whisper-large-v3"
    api_key_env = "GROQ_API_KEY"

    def _create_client(self) -> Groq:
        return Groq(api_key=self.api_key)
