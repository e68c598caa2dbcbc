"""Unit tests for the audio acquirers."""

import pytest
from unittest.mock import MagicMock, patch

import requests
from yt_dlp.utils import DownloadError

from youtube_captions.transcription.audio import (
    CHANNELS,
    SAMPLE_RATE,
    AudioAcquisitionError,
    PipedAudioAcquirer,
    YtDlpAudioAcquirer
)

WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


class TestYtDlpAudioAcquirer:

    def test_downloads_lowest_bitrate_audio(self, tmp_path):
        written = tmp_path / "dQw4w9WgXcQ.webm"
        written.write_bytes(b"audio")

        with patch("youtube_captions.transcription.audio.yt_dlp.YoutubeDL") as ydl_class:
            ydl = ydl_class.return_value.__enter__.return_value
            ydl.extract_info.return_value = {"id": "dQw4w9WgXcQ", "ext": "webm"}
            ydl.prepare_filename.return_value = str(written)

            result = YtDlpAudioAcquirer(proxy="http://proxy:8080").download(WATCH_URL, tmp_path)

        options = ydl_class.call_args.args[0]
        assert result == written
        assert options["format"] == "worstaudio/bestaudio"
        assert options["proxy"] == "http://proxy:8080"
        ydl.extract_info.assert_called_once_with(WATCH_URL, download=True)

    def test_download_error_is_wrapped(self, tmp_path):
        with patch("youtube_captions.transcription.audio.yt_dlp.YoutubeDL") as ydl_class:
            ydl = ydl_class.return_value.__enter__.return_value
            ydl.extract_info.side_effect = DownloadError("Sign in to confirm you're not a bot")

            with pytest.raises(AudioAcquisitionError):
                YtDlpAudioAcquirer().download(WATCH_URL, tmp_path)

    def test_removed_workdir_is_not_recreated(self, tmp_path):
        workdir = tmp_path / "scratch"

        with patch("youtube_captions.transcription.audio.yt_dlp.YoutubeDL") as ydl_class:
            with pytest.raises(AudioAcquisitionError):
                YtDlpAudioAcquirer().download(WATCH_URL, workdir)

        ydl_class.assert_not_called()
        assert not workdir.exists()

    def test_missing_output_file(self, tmp_path):
        with patch("youtube_captions.transcription.audio.yt_dlp.YoutubeDL") as ydl_class:
            ydl = ydl_class.return_value.__enter__.return_value
            ydl.extract_info.return_value = {}
            ydl.prepare_filename.return_value = str(tmp_path / "missing.webm")

            with pytest.raises(AudioAcquisitionError):
                YtDlpAudioAcquirer().download(WATCH_URL, tmp_path)

    def test_transcode_to_mono_16k_wav(self, tmp_path):
        source = tmp_path / "in.webm"
        target = tmp_path / "audio_16k.wav"

        with patch("youtube_captions.transcription.audio.AudioSegment") as segment_class:
            audio = segment_class.from_file.return_value
            audio.set_channels.return_value = audio
            audio.set_frame_rate.return_value = audio

            result = YtDlpAudioAcquirer().transcode(source, target)

        assert result == target
        audio.set_channels.assert_called_once_with(CHANNELS)
        audio.set_frame_rate.assert_called_once_with(SAMPLE_RATE)
        audio.export.assert_called_once_with(str(target), format="wav")

    def test_transcode_failure_is_wrapped(self, tmp_path):
        with patch("youtube_captions.transcription.audio.AudioSegment") as segment_class:
            segment_class.from_file.side_effect = OSError("ffmpeg not found")

            with pytest.raises(AudioAcquisitionError):
                YtDlpAudioAcquirer().transcode(tmp_path / "in.webm", tmp_path / "out.wav")


def _streams_response(streams):
    response = MagicMock()
    response.json.return_value = {"audioStreams": streams}
    return response


def _audio_response(chunks):
    response = MagicMock()
    response.iter_content.return_value = chunks
    response.__enter__.return_value = response
    return response


class TestPipedAudioAcquirer:

    def test_picks_lowest_bitrate_stream(self, tmp_path):
        session = MagicMock()
        session.get.side_effect = [
            _streams_response([
                {"url": "https://cdn/high", "bitrate": 160000, "mimeType": "audio/webm"},
                {"url": "https://cdn/low", "bitrate": 48000, "mimeType": "audio/mp4"}
            ]),
            _audio_response([b"abc", b"", b"def"])
        ]
        acquirer = PipedAudioAcquirer(base_url="https://piped.example", session=session)

        result = acquirer.download(WATCH_URL, tmp_path)

        assert result == tmp_path / "dQw4w9WgXcQ.m4a"
        assert result.read_bytes() == b"abcdef"
        assert session.get.call_args_list[0].args[0] == "https://piped.example/api/v1/streams/dQw4w9WgXcQ"
        assert session.get.call_args_list[1].args[0] == "https://cdn/low"

    def test_falls_through_instances(self, tmp_path):
        session = MagicMock()
        session.get.side_effect = [
            requests.ConnectionError("down"),
            _streams_response([{"url": "https://cdn/a", "bitrate": 1, "mimeType": "audio/webm"}]),
            _audio_response([b"x"])
        ]
        acquirer = PipedAudioAcquirer(session=session)

        result = acquirer.download(WATCH_URL, tmp_path)

        assert result.suffix == ".webm"

    def test_all_instances_fail(self, tmp_path):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("down")

        with pytest.raises(AudioAcquisitionError):
            PipedAudioAcquirer(session=session).download(WATCH_URL, tmp_path)

    def test_removed_workdir_is_not_recreated(self, tmp_path):
        session = MagicMock()
        workdir = tmp_path / "scratch"

        with pytest.raises(AudioAcquisitionError):
            PipedAudioAcquirer(session=session).download(WATCH_URL, workdir)

        session.get.assert_not_called()
        assert not workdir.exists()
