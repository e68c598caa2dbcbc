"""Transcript items and resolution outcomes."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.errors import TranscriptError


@dataclass
class TranscriptItem:
    """A single time-coded caption line."""
    text: str
    start: float
    duration: float
    generated: bool = False

    @property
    def end(self) -> float:
        """Calculate end time of the item."""
        return self.start + self.duration

    @property
    def timestamp_str(self) -> str:
        """Get formatted timestamp string for display."""
        minutes, seconds = divmod(int(self.start), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "start": self.start,
            "duration": self.duration,
            "generated": self.generated
        }


@dataclass
class ResolutionOutcome:
    """Result of a transcript resolution: either items or a classified error."""
    video_id: Optional[str]
    items: List[TranscriptItem] = field(default_factory=list)
    error: Optional[TranscriptError] = None

    @classmethod
    def ok(cls, video_id: str, items: List[TranscriptItem]) -> "ResolutionOutcome":
        return cls(video_id=video_id, items=list(items))

    @classmethod
    def failure(cls, error: TranscriptError, video_id: Optional[str] = None) -> "ResolutionOutcome":
        return cls(video_id=video_id, error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def generated(self) -> bool:
        """True if any item came from speech recognition."""
        return any(item.generated for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the response payload shape used by the API."""
        return {
            "videoId": self.video_id,
            "transcript": [item.to_dict() for item in self.items],
            "generated": self.generated
        }
