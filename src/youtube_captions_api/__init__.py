"""FastAPI backend for the YouTube captions service."""

__version__ = "0.1.0"
