"""Unit tests for video reference parsing."""

import pytest

from youtube_captions.utils.youtube_utils import (
    build_watch_url,
    extract_video_id,
    is_valid_video_id
)


class TestExtractVideoId:
    """Tests for extract_video_id."""

    @pytest.mark.parametrize("value,expected", [
        ("dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("a-b_c-d_e-f", "a-b_c-d_e-f"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?t=10", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/v/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ])
    def test_recognized_shapes(self, value, expected):
        assert extract_video_id(value) == expected

    @pytest.mark.parametrize("value", [
        None,
        "",
        "dQw4w9WgXc",
        "dQw4w9WgXcQQ",
        "not a url at all",
        "https://example.com/watch?v=dQw4w9WgXcQ",
        "https://vimeo.com/12345",
        "https://www.youtube.com/watch?v=short",
        "https://www.youtube.com/watch",
        "https://www.youtube.com/embed/",
        "https://www.youtube.com/channel/UC38IQsAvIsxxjztdMZQtwHA",
        "https://youtu.be/",
        "http://[::1",
    ])
    def test_unresolvable_input_returns_none(self, value):
        assert extract_video_id(value) is None

    def test_bare_id_is_checked_before_url_parsing(self):
        # Eleven characters that would also parse as a relative URL path
        assert extract_video_id("watch_v-abc") == "watch_v-abc"


class TestHelpers:
    """Tests for the small helpers around video IDs."""

    def test_is_valid_video_id(self):
        assert is_valid_video_id("dQw4w9WgXcQ")
        assert not is_valid_video_id("dQw4w9WgXc!")
        assert not is_valid_video_id(None)

    def test_build_watch_url(self):
        assert build_watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
