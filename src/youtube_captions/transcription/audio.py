"""Audio acquisition: download audio-only streams and convert them for speech recognition."""

import os
from pathlib import Path
from typing import List, Optional

import requests
import yt_dlp
from pydub import AudioSegment
from yt_dlp.utils import DownloadError

from .base import AudioAcquirer
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("transcription.audio")

SAMPLE_RATE = 16000
CHANNELS = 1

PIPED_INSTANCES = [
    "https://piped.video",
    "https://piped.projectsegfau.lt",
    "https://piped.privacydev.net",
    "https://piped.mha.fi",
]


class AudioAcquisitionError(Exception):
    """Raised when audio could not be downloaded or converted."""


def _require_workdir(workdir: Path) -> None:
    # The caller owns the directory; never recreate one it already removed
    if not workdir.is_dir():
        raise AudioAcquisitionError(f"Working directory {workdir} does not exist")


class PydubTranscodeMixin:
    """Shared mono/16 kHz WAV conversion via pydub (FFmpeg under the hood)."""

    def transcode(self, source: Path, target: Path) -> Path:
        logger.debug("Transcoding %s to %s", source, target)
        try:
            audio = AudioSegment.from_file(str(source))
            audio = audio.set_channels(CHANNELS).set_frame_rate(SAMPLE_RATE)
            audio.export(str(target), format="wav")
        except Exception as e:
            raise AudioAcquisitionError(f"Failed to transcode {source}: {e}") from e
        return target


class YtDlpAudioAcquirer(PydubTranscodeMixin, AudioAcquirer):
    """Download audio-only streams with yt-dlp."""

    _AUDIO_FMT = "worstaudio"
    _AUDIO_FMT_FALLBACK = "bestaudio"

    def __init__(self, proxy: Optional[str] = None, socket_timeout: int = 15):
        self.proxy = proxy
        self.socket_timeout = socket_timeout

    def _options(self, workdir: Path) -> dict:
        opts = {
            "format": f"{self._AUDIO_FMT}/{self._AUDIO_FMT_FALLBACK}",
            "quiet": True,
            "noprogress": True,
            "outtmpl": str(workdir / "%(id)s.%(ext)s"),
            "noplaylist": True,
            "retries": 3,
            "socket_timeout": self.socket_timeout,
        }
        if self.proxy:
            opts["proxy"] = self.proxy
        return opts

    def download(self, watch_url: str, workdir: Path) -> Path:
        _require_workdir(workdir)
        logger.debug("Downloading audio for %s with yt-dlp", watch_url)
        try:
            with yt_dlp.YoutubeDL(self._options(workdir)) as ydl:
                info = ydl.extract_info(watch_url, download=True)
                path = Path(ydl.prepare_filename(info))
        except DownloadError as e:
            raise AudioAcquisitionError(f"yt-dlp failed to download audio: {e}") from e

        if not path.exists():
            raise AudioAcquisitionError("yt-dlp reported success but no audio file was written")
        return path


class PipedAudioAcquirer(PydubTranscodeMixin, AudioAcquirer):
    """Download audio through the public Piped API."""

    def __init__(self, base_url: Optional[str] = None, timeout: int = 20, session: Optional[requests.Session] = None):
        self.instances: List[str] = [base_url] if base_url else []
        self.instances += [i for i in PIPED_INSTANCES if i != base_url]
        self.timeout = timeout
        self.session = session or requests.Session()

    def download(self, watch_url: str, workdir: Path) -> Path:
        video_id = extract_video_id(watch_url)
        if not video_id:
            raise AudioAcquisitionError(f"Cannot derive a video ID from {watch_url}")
        _require_workdir(workdir)

        last_exc: Optional[Exception] = None
        for base in self.instances:
            try:
                return self._download_from(base, video_id, workdir)
            except (requests.RequestException, ValueError, AudioAcquisitionError) as e:
                logger.debug("Piped instance %s failed: %s", base, e)
                last_exc = e
        raise AudioAcquisitionError(f"All Piped instances failed: {last_exc}") from last_exc

    def _download_from(self, base: str, video_id: str, workdir: Path) -> Path:
        resp = self.session.get(f"{base}/api/v1/streams/{video_id}", timeout=self.timeout)
        resp.raise_for_status()
        streams = resp.json().get("audioStreams") or []
        streams = [s for s in streams if s.get("url")]
        if not streams:
            raise AudioAcquisitionError("No audio streams listed by Piped")

        # Lowest bitrate is enough for speech recognition
        stream = min(streams, key=lambda s: s.get("bitrate") or 0)
        ext = "m4a" if "mp4" in (stream.get("mimeType") or "").lower() else "webm"
        out_path = workdir / f"{video_id}.{ext}"
        with self.session.get(stream["url"], stream=True, timeout=self.timeout * 4) as r:
            r.raise_for_status()
            with open(out_path, "wb") as f:
                for chunk in r.iter_content(chunk_size=8192):
                    if chunk:
                        f.write(chunk)
        if os.path.getsize(out_path) == 0:
            raise AudioAcquisitionError("Piped returned an empty audio stream")
        return out_path
