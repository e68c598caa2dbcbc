"""FastAPI dependencies for service injection."""

from fastapi import Depends

from youtube_captions.service_factory import ServiceFactory, get_service_factory
from youtube_captions.services.transcript_service import TranscriptResolver

from .config import APIConfig, get_api_config


def get_factory() -> ServiceFactory:
    """
    Get service factory instance.

    Returns:
        The process-wide ServiceFactory
    """
    return get_service_factory()


def get_transcript_resolver(service_factory: ServiceFactory = Depends(get_factory)) -> TranscriptResolver:
    """
    Get TranscriptResolver instance.

    Args:
        service_factory: ServiceFactory instance

    Returns:
        TranscriptResolver instance
    """
    return service_factory.get_transcript_resolver()


def get_config() -> APIConfig:
    return get_api_config()
