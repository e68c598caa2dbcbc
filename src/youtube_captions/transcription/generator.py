"""Generate captions from audio when no authored transcript exists."""

import asyncio
import functools
import os
import shutil
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Dict, List, Optional, Tuple, Union

from .base import AudioAcquirer, SpeechRecognizer
from .models import RecognitionResult
from ..core.errors import GenerationFailed, TranscriptError, UpstreamTimeout
from ..models.transcript import TranscriptItem
from ..utils.logging import get_logger
from ..utils.youtube_utils import build_watch_url

logger = get_logger("transcription.generator")

AUTO_LANGUAGE = "auto"


class CaptionGenerator:
    """
    Download audio for a video, run speech recognition and return the
    result as generated transcript items.

    Two artifact policies are supported:

    * ``keep_audio=False`` (default): every invocation works in a private
      scratch directory under ``audio_dir`` which is removed once
      recognition finishes, whether it succeeded or not. If a worker
      thread outlived its timeout, removal happens once that thread exits.
    * ``keep_audio=True``: the transcoded audio is cached at
      ``<audio_dir>/<video_id>.wav`` and reused by later invocations. New
      files are written under a scratch name and moved into place
      atomically.

    Work for one video ID is serialized with a per-ID lock, and concurrent
    requests for the same (video ID, language) share a single task.
    """

    def __init__(
        self,
        acquirer: AudioAcquirer,
        recognizer: SpeechRecognizer,
        audio_dir: Union[str, Path],
        keep_audio: bool = False,
        download_timeout: float = 300.0,
        recognition_timeout: float = 600.0
    ):
        self.acquirer = acquirer
        self.recognizer = recognizer
        self.audio_dir = Path(audio_dir)
        self.keep_audio = keep_audio
        self.download_timeout = download_timeout
        self.recognition_timeout = recognition_timeout

        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}
        self._inflight: Dict[Tuple[str, str], asyncio.Future] = {}

    def cached_audio_path(self, video_id: str) -> Path:
        return self.audio_dir / f"{video_id}.wav"

    async def generate(self, video_id: str, language: Optional[str] = AUTO_LANGUAGE) -> List[TranscriptItem]:
        """
        Generate a transcript for *video_id* with speech recognition.

        Args:
            video_id: Canonical video ID
            language: Language code hint, or "auto" to let the recognizer detect it

        Returns:
            Transcript items with ``generated=True``

        Raises:
            GenerationFailed: Audio acquisition or recognition failed
            UpstreamTimeout: Download or recognition exceeded its timeout
        """
        language = language or AUTO_LANGUAGE
        key = (video_id, language)

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._generate(video_id, language))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.info(f"Joining in-flight caption generation for video {video_id} ({language})")

        # One caller being cancelled must not cancel the shared work
        return await asyncio.shield(task)

    def _forget(self, key: Tuple[str, str], task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    async def _generate(self, video_id: str, language: str) -> List[TranscriptItem]:
        hint = None if language == AUTO_LANGUAGE else language
        logger.info(f"Generating captions for video {video_id} (language={language})")

        # Worker threads started for this invocation; scratch removal waits on them
        workers: List[asyncio.Future] = []

        async with self._identifier_lock(video_id):
            try:
                async with self._audio(video_id, workers) as audio_path:
                    result = await self._recognize(audio_path, hint, workers)
            except TranscriptError:
                raise
            except Exception as e:
                logger.error(f"Caption generation failed for video {video_id}: {e}")
                raise GenerationFailed(f"Caption generation failed for video {video_id}: {e}") from e

        items = [segment.to_item() for segment in result.segments if segment.text.strip()]
        if not items:
            raise GenerationFailed(f"Speech recognition produced no segments for video {video_id}")

        logger.info(f"Generated {len(items)} caption lines for video {video_id}")
        return items

    @asynccontextmanager
    async def _identifier_lock(self, video_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(video_id, asyncio.Lock())
        self._lock_users[video_id] = self._lock_users.get(video_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[video_id] -= 1
            if self._lock_users[video_id] == 0:
                del self._lock_users[video_id]
                del self._locks[video_id]

    @asynccontextmanager
    async def _audio(self, video_id: str, workers: List[asyncio.Future]) -> AsyncIterator[Path]:
        self.audio_dir.mkdir(parents=True, exist_ok=True)
        watch_url = build_watch_url(video_id)

        if self.keep_audio:
            cached = self.cached_audio_path(video_id)
            if cached.exists():
                logger.info(f"Reusing cached audio {cached}")
                yield cached
                return
            scratch = Path(tempfile.mkdtemp(prefix=f"{video_id}_", dir=self.audio_dir))
            try:
                wav = await self._acquire(watch_url, scratch, workers)
                os.replace(wav, cached)
            finally:
                self._release_scratch(scratch, workers)
            yield cached
            return

        scratch = Path(tempfile.mkdtemp(prefix=f"{video_id}_", dir=self.audio_dir))
        try:
            yield await self._acquire(watch_url, scratch, workers)
        finally:
            self._release_scratch(scratch, workers)

    async def _acquire(self, watch_url: str, workdir: Path, workers: List[asyncio.Future]) -> Path:
        target = workdir / "audio_16k.wav"
        try:
            source = await self._run_worker(
                workers, self.download_timeout, self.acquirer.download, watch_url, workdir
            )
            return await self._run_worker(
                workers, self.download_timeout, self.acquirer.transcode, source, target
            )
        except asyncio.TimeoutError as e:
            raise UpstreamTimeout("audio_download", self.download_timeout) from e

    async def _recognize(
        self,
        audio_path: Path,
        language: Optional[str],
        workers: List[asyncio.Future]
    ) -> RecognitionResult:
        try:
            return await self._run_worker(
                workers, self.recognition_timeout, self.recognizer.transcribe, audio_path, language
            )
        except asyncio.TimeoutError as e:
            raise UpstreamTimeout("speech_recognition", self.recognition_timeout) from e

    @staticmethod
    async def _run_worker(workers: List[asyncio.Future], timeout: float, func, *args):
        """
        Run a blocking call on the default executor, bounded by *timeout*.

        A timeout stops the wait, not the thread. The executor future is
        recorded in *workers* so callers can tell when the thread is done.
        """
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, functools.partial(func, *args))
        workers.append(future)
        return await asyncio.wait_for(asyncio.shield(future), timeout=timeout)

    def _release_scratch(self, path: Path, workers: List[asyncio.Future]) -> None:
        pending = [worker for worker in workers if not worker.done()]
        if not pending:
            self._cleanup(path)
            return

        # A timed-out thread may still write into the scratch directory
        logger.info(f"Deferring removal of {path} until {len(pending)} timed-out worker(s) finish")
        finished = asyncio.gather(*pending, return_exceptions=True)
        finished.add_done_callback(lambda _: self._cleanup(path))

    @staticmethod
    def _cleanup(path: Path) -> None:
        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.warning(f"Error removing temporary audio {path}: {e}")
