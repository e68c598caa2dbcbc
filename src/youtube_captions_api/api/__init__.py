"""API package for the YouTube captions service."""
