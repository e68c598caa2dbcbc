from .transcript import TranscriptItem, ResolutionOutcome

__all__ = ["TranscriptItem", "ResolutionOutcome"]
