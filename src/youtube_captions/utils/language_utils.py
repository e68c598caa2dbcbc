"""Utilities for language code normalization."""

import re
from typing import Dict, Optional

# Common language names and their ISO 639-1 codes
LANGUAGE_CODES = {
    "english": "en",
    "spanish": "es",
    "french": "fr",
    "german": "de",
    "italian": "it",
    "portuguese": "pt",
    "russian": "ru",
    "japanese": "ja",
    "korean": "ko",
    "chinese": "zh",
    "arabic": "ar",
    "hindi": "hi",
    "turkish": "tr",
    "dutch": "nl",
    "swedish": "sv",
    "polish": "pl",
    "vietnamese": "vi",
    "thai": "th",
    "indonesian": "id",
    "greek": "el",
    "romanian": "ro",
    "czech": "cs",
    "hungarian": "hu",
    "ukrainian": "uk",
    "hebrew": "he",
    "finnish": "fi",
    "danish": "da",
    "norwegian": "no",
}

LANGUAGE_CODE_PATTERN = re.compile(r'^[a-z]{2,3}(-[A-Z]{2})?$')


def get_supported_languages() -> Dict[str, str]:
    """
    Get the language names understood by :func:`get_language_code`.

    Returns:
        Dict mapping lowercase language names to ISO 639-1 codes
    """
    return dict(LANGUAGE_CODES)


def get_language_name(language_code: Optional[str]) -> Optional[str]:
    """
    Get the language name for a code.

    Args:
        language_code: ISO 639-1 code, optionally region-tagged

    Returns:
        Capitalized language name or None if unknown
    """
    if not language_code:
        return None
    base = language_code.lower().split("-")[0]
    for name, code in LANGUAGE_CODES.items():
        if code == base:
            return name.capitalize()
    return None


def get_language_code(language: Optional[str]) -> Optional[str]:
    """
    Map a language name or code to a canonical lowercase code.

    Args:
        language: Language name ("English") or code ("en", "pt-BR")

    Returns:
        Language code, or None when there is no usable preference
    """
    if not language:
        return None

    language = language.strip()
    if not language:
        return None

    if LANGUAGE_CODE_PATTERN.match(language):
        return language.lower()

    return LANGUAGE_CODES.get(language.lower())
