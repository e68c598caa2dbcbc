"""Unit tests for the hosted Whisper recognizers."""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from youtube_captions.transcription.factory import AcquirerFactory, RecognizerFactory
from youtube_captions.transcription.audio import PipedAudioAcquirer, YtDlpAudioAcquirer
from youtube_captions.transcription.whisper import (
    GroqWhisperRecognizer,
    OpenAIWhisperRecognizer,
    RecognitionError,
    parse_verbose_response
)


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "audio_16k.wav"
    path.write_bytes(b"RIFF")
    return path


class TestParseVerboseResponse:

    def test_object_segments(self):
        resp = SimpleNamespace(
            language="english",
            text="hi there",
            segments=[
                SimpleNamespace(text=" hi", start=0.0, end=1.0),
                SimpleNamespace(text="   ", start=1.0, end=1.5),
                SimpleNamespace(text="there ", start=1.5, end=2.0)
            ]
        )

        result = parse_verbose_response(resp)

        assert [(s.text, s.start, s.end) for s in result.segments] == [("hi", 0.0, 1.0), ("there", 1.5, 2.0)]
        assert result.language == "english"

    def test_dict_segments(self):
        resp = {"segments": [{"text": "hola", "start": 2, "end": 3}], "language": "es"}

        result = parse_verbose_response(resp)

        assert result.segments[0].start == 2.0
        assert result.segments[0].end == 3.0

    def test_text_without_segments_spans_zero(self):
        result = parse_verbose_response({"text": " whole thing ", "segments": []})

        assert len(result.segments) == 1
        assert (result.segments[0].text, result.segments[0].start, result.segments[0].end) == ("whole thing", 0.0, 0.0)

    def test_nothing_recognized(self):
        with pytest.raises(RecognitionError):
            parse_verbose_response({"text": "", "segments": []})


class TestWhisperRecognizer:

    def test_requests_segmented_output(self, audio_file):
        client = MagicMock()
        client.audio.transcriptions.create.return_value = {"segments": [{"text": "hi", "start": 0, "end": 1}]}
        recognizer = OpenAIWhisperRecognizer(api_key="key", client=client)

        recognizer.transcribe(audio_file, "pt-br")

        kwargs = client.audio.transcriptions.create.call_args.kwargs
        assert kwargs["model"] == "whisper-1"
        assert kwargs["response_format"] == "verbose_json"
        assert kwargs["timestamp_granularities"] == ["segment"]
        assert kwargs["language"] == "pt"

    def test_language_omitted_for_auto_detection(self, audio_file):
        client = MagicMock()
        client.audio.transcriptions.create.return_value = {"text": "hi"}
        recognizer = GroqWhisperRecognizer(api_key="key", client=client)

        recognizer.transcribe(audio_file)

        kwargs = client.audio.transcriptions.create.call_args.kwargs
        assert "language" not in kwargs
        assert kwargs["model"] == "whisper-large-v3"

    def test_api_errors_are_wrapped(self, audio_file):
        client = MagicMock()
        client.audio.transcriptions.create.side_effect = RuntimeError("rate limited")
        recognizer = OpenAIWhisperRecognizer(api_key="key", client=client)

        with pytest.raises(RecognitionError) as exc_info:
            recognizer.transcribe(audio_file)

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "groq-env-key")

        assert GroqWhisperRecognizer().api_key == "groq-env-key"


class TestFactories:

    def test_recognizer_factory(self):
        assert isinstance(RecognizerFactory.create_recognizer("openai", api_key="k"), OpenAIWhisperRecognizer)
        recognizer = RecognizerFactory.create_recognizer("GROQ", model_name="distil-whisper", api_key="k")
        assert isinstance(recognizer, GroqWhisperRecognizer)
        assert recognizer.model == "distil-whisper"

    def test_unknown_recognizer(self):
        with pytest.raises(ValueError):
            RecognizerFactory.create_recognizer("local")

    def test_acquirer_factory(self):
        acquirer = AcquirerFactory.create_acquirer("yt-dlp", proxy="http://proxy:8080")
        assert isinstance(acquirer, YtDlpAudioAcquirer)
        assert acquirer.proxy == "http://proxy:8080"

        piped = AcquirerFactory.create_acquirer("piped", base_url="https://piped.example")
        assert isinstance(piped, PipedAudioAcquirer)
        assert piped.instances[0] == "https://piped.example"

    def test_unknown_acquirer(self):
        with pytest.raises(ValueError):
            AcquirerFactory.create_acquirer("ftp")
