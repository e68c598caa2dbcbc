"""Unit tests for language normalization."""

import pytest

from youtube_captions.utils.language_utils import (
    LANGUAGE_CODES,
    get_language_code,
    get_language_name,
    get_supported_languages
)


class TestGetLanguageCode:

    @pytest.mark.parametrize("value,expected", [
        ("en", "en"),
        ("pt-BR", "pt-br"),
        ("fil", "fil"),
        ("English", "en"),
        ("SPANISH", "es"),
        ("norwegian", "no"),
        ("  French  ", "fr"),
        (" de ", "de"),
    ])
    def test_codes_and_names(self, value, expected):
        assert get_language_code(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "Klingon", "EN", "en-us", "english-US"])
    def test_unknown_means_no_preference(self, value):
        assert get_language_code(value) is None

    def test_every_table_name_resolves(self):
        for name, code in LANGUAGE_CODES.items():
            assert get_language_code(name.title()) == code


class TestLanguageHelpers:

    def test_table_has_all_names(self):
        assert len(get_supported_languages()) == 28

    def test_supported_languages_is_a_copy(self):
        languages = get_supported_languages()
        languages["elvish"] = "xx"
        assert "elvish" not in get_supported_languages()

    def test_get_language_name(self):
        assert get_language_name("es") == "Spanish"
        assert get_language_name("pt-br") == "Portuguese"
        assert get_language_name("xx") is None
        assert get_language_name(None) is None
