"""Caption generation via audio download and speech recognition."""

from .models import RecognitionSegment, RecognitionResult
from .base import SpeechRecognizer, AudioAcquirer
from .audio import YtDlpAudioAcquirer, PipedAudioAcquirer, AudioAcquisitionError
from .whisper import OpenAIWhisperRecognizer, GroqWhisperRecognizer, RecognitionError
from .factory import RecognizerFactory, AcquirerFactory
from .generator import CaptionGenerator

__all__ = [
    "RecognitionSegment",
    "RecognitionResult",
    "SpeechRecognizer",
    "AudioAcquirer",
    "YtDlpAudioAcquirer",
    "PipedAudioAcquirer",
    "AudioAcquisitionError",
    "OpenAIWhisperRecognizer",
    "GroqWhisperRecognizer",
    "RecognitionError",
    "RecognizerFactory",
    "AcquirerFactory",
    "CaptionGenerator"
]
