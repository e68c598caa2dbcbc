"""Speech recognition results."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..models.transcript import TranscriptItem


@dataclass
class RecognitionSegment:
    """A span of recognized speech with timing information (seconds)."""
    text: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return max(0.0, self.end - self.start)

    def to_item(self) -> TranscriptItem:
        """Convert to a generated transcript item."""
        return TranscriptItem(
            text=self.text.strip(),
            start=self.start,
            duration=self.duration,
            generated=True
        )


@dataclass
class RecognitionResult:
    """Segmented output of a speech recognizer."""
    segments: List[RecognitionSegment] = field(default_factory=list)
    language: Optional[str] = None

    @property
    def text(self) -> str:
        """Get plain text with all segments joined."""
        return " ".join(segment.text.strip() for segment in self.segments)
